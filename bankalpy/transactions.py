"""
Transaction Module

Immutable records of balance-affecting movements on an account or loan.
Amounts are kept as Decimal; the timestamp is captured when the record is
created and cannot be supplied or changed afterwards.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from enum import Enum


class TransactionType(Enum):
    """Types of balance movements"""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Convert a numeric value to Decimal without validating it.

    Floats go through str() so that 100.1 becomes Decimal('100.1') rather than
    its binary expansion. None is passed through.
    """
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Transaction:
    """Single deposit or withdrawal with the resulting balance"""
    transaction_type: TransactionType
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime = field(
        init=False, default_factory=lambda: datetime.now(timezone.utc)
    )

    def __post_init__(self):
        object.__setattr__(self, 'amount', to_decimal(self.amount))
        object.__setattr__(self, 'balance_after', to_decimal(self.balance_after))

    @property
    def is_deposit(self) -> bool:
        return self.transaction_type == TransactionType.DEPOSIT

    @property
    def is_withdrawal(self) -> bool:
        return self.transaction_type == TransactionType.WITHDRAWAL

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'transaction_type': self.transaction_type.value,
            'amount': str(self.amount),
            'balance_after': str(self.balance_after),
            'timestamp': self.timestamp.isoformat()
        }
