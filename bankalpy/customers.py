"""
Customer Module

Customer profiles with personal details and the ordered list of accounts the
customer holds.
"""

from datetime import date
from typing import Any, Dict, List, Tuple

from .accounts import Account


class Customer:
    """
    Bank customer

    id_customer, nif, date_birth and sex are fixed once the customer is
    created. id_customer is supplied by the caller and is not checked for
    uniqueness; neither is the NIF.
    """

    def __init__(
        self,
        id_customer: int,
        name: str,
        first_last_name: str,
        second_last_name: str,
        nif: str,
        date_birth: date,
        sex: str,
        address: str,
        zip_code: str,
        city: str
    ):
        self._id_customer = id_customer
        self.name = name
        self.first_last_name = first_last_name
        self.second_last_name = second_last_name
        self._nif = nif
        self._date_birth = date_birth
        self._sex = sex
        self.address = address
        self.zip_code = zip_code
        self.city = city
        self._accounts: List[Account] = []

    def __repr__(self) -> str:
        return f"Customer(id_customer={self._id_customer}, nif={self._nif!r})"

    @property
    def id_customer(self) -> int:
        return self._id_customer

    @property
    def nif(self) -> str:
        return self._nif

    @property
    def date_birth(self) -> date:
        return self._date_birth

    @property
    def sex(self) -> str:
        return self._sex

    @property
    def full_name(self) -> str:
        """Name followed by both surnames, skipping empty parts"""
        parts = [self.name, self.first_last_name, self.second_last_name]
        return " ".join(p for p in parts if p)

    @property
    def accounts(self) -> Tuple[Account, ...]:
        """Snapshot of the customer's accounts in the order they were added"""
        return tuple(self._accounts)

    def add_account(self, account: Account) -> None:
        self._accounts.append(account)

    def remove_account(self, account: Account) -> bool:
        """
        Remove the first occurrence of account.

        Returns:
            True if the account was held by the customer and removed
        """
        for position, held in enumerate(self._accounts):
            if held is account:
                del self._accounts[position]
                return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'id_customer': self._id_customer,
            'name': self.name,
            'first_last_name': self.first_last_name,
            'second_last_name': self.second_last_name,
            'nif': self._nif,
            'date_birth': self._date_birth.isoformat() if self._date_birth else None,
            'sex': self._sex,
            'address': self.address,
            'zip_code': self.zip_code,
            'city': self.city,
            'accounts': [a.to_dict() for a in self._accounts]
        }
