"""
Loan Module

Loan records: amount, interest rate, start and due dates, remaining balance
and status, plus the transactions recorded against the loan and an optional
reference to the account the loan is tied to.

No relationship between the fields is enforced. The remaining balance is not
derived from the amount or from the recorded transactions.
"""

from decimal import Decimal
from datetime import date
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .transactions import Transaction, to_decimal


@dataclass(eq=False)
class Loan:
    """Loan with its terms, status and transaction history"""
    id_loan: Optional[int] = None
    loan_amount: Optional[Decimal] = None
    interest_rate: Optional[Decimal] = None     # Annual, e.g. 0.045 for 4.5%
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    remaining_balance: Optional[Decimal] = None
    is_active: bool = False
    account_id: Optional[int] = None            # Account.id_account, if any
    _transactions: List[Transaction] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        self.loan_amount = to_decimal(self.loan_amount)
        self.interest_rate = to_decimal(self.interest_rate)
        self.remaining_balance = to_decimal(self.remaining_balance)

    # Setters mirror plain attribute assignment and never validate

    def set_id_loan(self, id_loan: int) -> None:
        self.id_loan = id_loan

    def set_loan_amount(self, loan_amount: Any) -> None:
        self.loan_amount = to_decimal(loan_amount)

    def set_interest_rate(self, interest_rate: Any) -> None:
        self.interest_rate = to_decimal(interest_rate)

    def set_start_date(self, start_date: date) -> None:
        self.start_date = start_date

    def set_due_date(self, due_date: date) -> None:
        self.due_date = due_date

    def set_remaining_balance(self, remaining_balance: Any) -> None:
        self.remaining_balance = to_decimal(remaining_balance)

    def set_active(self, active: bool) -> None:
        self.is_active = active

    def set_account_id(self, account_id: Optional[int]) -> None:
        self.account_id = account_id

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Snapshot of the loan's transactions in insertion order"""
        return tuple(self._transactions)

    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        def _str(value):
            return str(value) if value is not None else None

        def _iso(value):
            return value.isoformat() if value is not None else None

        return {
            'id_loan': self.id_loan,
            'loan_amount': _str(self.loan_amount),
            'interest_rate': _str(self.interest_rate),
            'start_date': _iso(self.start_date),
            'due_date': _iso(self.due_date),
            'remaining_balance': _str(self.remaining_balance),
            'is_active': self.is_active,
            'account_id': self.account_id,
            'transactions': [t.to_dict() for t in self._transactions]
        }
