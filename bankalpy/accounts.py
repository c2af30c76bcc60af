"""
Account Module

Bank accounts with an allocated numeric identity, a mutable balance and
active flag, and an append-only list of transactions.

The balance and the transaction history are independent: setting the balance
does not record a transaction, and recording a transaction does not move the
balance. Callers that want both must do both.
"""

from decimal import Decimal
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from .identity import AccountIdAllocator, get_default_allocator
from .transactions import Transaction, to_decimal


class Account:
    """
    Bank account identified by an allocator-issued id

    The id, account number and opening date are fixed at construction.
    Account numbers are caller-supplied and not checked for uniqueness.
    """

    def __init__(
        self,
        account_number: str,
        opening_date: Optional[date] = None,
        balance: Any = None,
        allocator: Optional[AccountIdAllocator] = None
    ):
        """
        Open an account.

        Args:
            account_number: Account number
            opening_date: Date the account is opened (today if omitted)
            balance: Initial balance (zero if omitted)
            allocator: Source of the account id (process-wide default if omitted)
        """
        allocator = allocator or get_default_allocator()
        self._id_account = allocator.allocate()
        self._account_number = account_number
        self._opening_date = opening_date if opening_date is not None else date.today()
        self._balance = to_decimal(balance) if balance is not None else Decimal('0')
        self.is_active = True
        self._transactions: List[Transaction] = []

    def __repr__(self) -> str:
        return (f"Account(id_account={self._id_account}, "
                f"account_number={self._account_number!r}, balance={self._balance})")

    @property
    def id_account(self) -> int:
        return self._id_account

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def opening_date(self) -> date:
        return self._opening_date

    @property
    def balance(self) -> Decimal:
        return self._balance

    @balance.setter
    def balance(self, value: Any) -> None:
        # Negative balances are allowed
        self._balance = to_decimal(value)

    def set_balance(self, value: Any) -> None:
        self.balance = value

    def set_active(self, active: bool) -> None:
        self.is_active = active

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Snapshot of the transaction history in insertion order"""
        return tuple(self._transactions)

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a transaction to the history"""
        self._transactions.append(transaction)

    @staticmethod
    def get_number_of_accounts() -> int:
        """
        Number of accounts created with the process-wide allocator.

        Counts every construction, including accounts that are no longer
        referenced anywhere.
        """
        return get_default_allocator().count

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'id_account': self._id_account,
            'account_number': self._account_number,
            'opening_date': self._opening_date.isoformat(),
            'balance': str(self._balance),
            'is_active': self.is_active,
            'transactions': [t.to_dict() for t in self._transactions]
        }
