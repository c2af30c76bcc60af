"""
Test suite for customers module

Tests customer fields, the read-only account snapshot and account
add/remove on the customer itself.
"""

import pytest
from datetime import date

from bankalpy.identity import AccountIdAllocator
from bankalpy.accounts import Account
from bankalpy.customers import Customer


class TestCustomer:
    """Test Customer fields"""

    def test_customer_creation(self, customer):
        """Test that all fields are populated and the account list is empty"""
        assert customer.id_customer == 1
        assert customer.name == "Laia"
        assert customer.first_last_name == "Puig"
        assert customer.second_last_name == "Serra"
        assert customer.nif == "12345678Z"
        assert customer.date_birth == date(1990, 5, 17)
        assert customer.sex == "F"
        assert customer.address == "Carrer Major 12"
        assert customer.zip_code == "08001"
        assert customer.city == "Barcelona"
        assert customer.accounts == ()

    def test_mutable_fields(self, customer):
        """Test updating names and address"""
        customer.name = "Laura"
        customer.first_last_name = "Vidal"
        customer.second_last_name = "Roca"
        customer.address = "Avinguda Diagonal 1"
        customer.zip_code = "08019"
        customer.city = "Girona"

        assert customer.full_name == "Laura Vidal Roca"
        assert customer.address == "Avinguda Diagonal 1"
        assert customer.zip_code == "08019"
        assert customer.city == "Girona"

    def test_fixed_fields_are_read_only(self, customer):
        """Test that identity fields cannot be reassigned"""
        with pytest.raises(AttributeError):
            customer.nif = "00000000T"
        with pytest.raises(AttributeError):
            customer.date_birth = date(2000, 1, 1)
        with pytest.raises(AttributeError):
            customer.sex = "M"
        with pytest.raises(AttributeError):
            customer.id_customer = 2

    def test_full_name_skips_empty_surname(self, customer):
        """Test full name when there is no second surname"""
        customer.second_last_name = ""
        assert customer.full_name == "Laia Puig"


class TestCustomerAccounts:
    """Test the customer's account list"""

    def test_add_and_remove(self, customer):
        """Test adding and removing on the customer"""
        allocator = AccountIdAllocator()
        first = Account("ACC-1", allocator=allocator)
        second = Account("ACC-2", allocator=allocator)

        customer.add_account(first)
        customer.add_account(second)
        assert customer.accounts == (first, second)

        assert customer.remove_account(first)
        assert customer.accounts == (second,)
        assert not customer.remove_account(first)

    def test_remove_first_occurrence_only(self, customer):
        """Test that a doubly-added account is removed once per call"""
        account = Account("ACC-1", allocator=AccountIdAllocator())
        customer.add_account(account)
        customer.add_account(account)

        assert customer.remove_account(account)
        assert customer.accounts == (account,)

    def test_remove_matches_by_identity(self, customer):
        """Test that an account with the same number is not a match"""
        allocator = AccountIdAllocator()
        held = Account("SAME", allocator=allocator)
        other = Account("SAME", allocator=allocator)
        customer.add_account(held)

        assert not customer.remove_account(other)
        assert customer.accounts == (held,)

    def test_accounts_snapshot_is_read_only(self, customer):
        """Test that the exposed list cannot be used to mutate the customer"""
        customer.add_account(Account("ACC-1", allocator=AccountIdAllocator()))
        snapshot = customer.accounts

        assert isinstance(snapshot, tuple)
        with pytest.raises(AttributeError):
            snapshot.append(None)
        assert len(customer.accounts) == 1

    def test_to_dict(self, customer):
        """Test serializing a customer with an account"""
        customer.add_account(Account("ACC-1", date(2024, 1, 1), 10, allocator=AccountIdAllocator()))
        data = customer.to_dict()

        assert data['nif'] == "12345678Z"
        assert data['date_birth'] == "1990-05-17"
        assert data['city'] == "Barcelona"
        assert [a['account_number'] for a in data['accounts']] == ["ACC-1"]
