"""
Shared fixtures for the bankalpy test suite
"""

import pytest
from datetime import date

from bankalpy.identity import (
    AccountIdAllocator, get_default_allocator, set_default_allocator
)
from bankalpy.customers import Customer


@pytest.fixture
def fresh_allocator():
    """Swap in a new process-wide allocator for the duration of a test"""
    previous = get_default_allocator()
    allocator = AccountIdAllocator()
    set_default_allocator(allocator)
    yield allocator
    set_default_allocator(previous)


@pytest.fixture
def customer():
    """Customer with no accounts"""
    return Customer(
        id_customer=1,
        name="Laia",
        first_last_name="Puig",
        second_last_name="Serra",
        nif="12345678Z",
        date_birth=date(1990, 5, 17),
        sex="F",
        address="Carrer Major 12",
        zip_code="08001",
        city="Barcelona"
    )
