"""
Customer Service Module

Relationship and lookup operations over customers and their accounts. The
service keeps no state of its own: every call names the customer (or the
customer collection) it works on.
"""

from typing import Iterable, Optional

from .accounts import Account
from .customers import Customer
from .logging_config import get_logger, log_action


class CustomerService:
    """
    Manages the accounts held by customers and finds customers by NIF
    """

    def __init__(self):
        self.logger = get_logger("bankalpy.customer_service")

    def add_account(self, customer: Customer, account: Account) -> None:
        """Append an account to the customer's account list"""
        customer.add_account(account)
        log_action(
            self.logger, "info",
            f"Account {account.account_number} added to customer {customer.id_customer}",
            action="account.added",
            resource=f"customer:{customer.id_customer}",
            extra={"id_account": account.id_account}
        )

    def remove_account(self, customer: Customer, account: Account) -> bool:
        """
        Remove an account from the customer's account list.

        The account itself is left as it is: its balance, status and
        transactions are not touched.

        Returns:
            True if the account was found and removed, False otherwise
        """
        removed = customer.remove_account(account)
        if removed:
            log_action(
                self.logger, "info",
                f"Account {account.account_number} removed from customer {customer.id_customer}",
                action="account.removed",
                resource=f"customer:{customer.id_customer}",
                extra={"id_account": account.id_account}
            )
        else:
            self.logger.debug(
                f"Account {account.account_number} not held by customer {customer.id_customer}"
            )
        return removed

    def get_account_by_index(self, customer: Customer, index: int) -> Account:
        """
        Get the account at a position in insertion order.

        Raises:
            IndexError: If index is negative or not less than the number of accounts
        """
        accounts = customer.accounts
        if index < 0 or index >= len(accounts):
            log_action(
                self.logger, "warning",
                f"Account index {index} out of range for customer {customer.id_customer}",
                action="account.lookup_failed",
                resource=f"customer:{customer.id_customer}",
                extra={"index": index, "number_of_accounts": len(accounts)}
            )
            raise IndexError(
                f"Account index {index} out of range (customer has {len(accounts)} accounts)"
            )
        return accounts[index]

    def get_number_of_accounts(self, customer: Customer) -> int:
        """Get the number of accounts the customer currently holds"""
        return len(customer.accounts)

    def find_customer_by_nif(self, customers: Iterable[Customer], nif: str) -> Optional[Customer]:
        """
        Find the first customer whose NIF equals nif exactly.

        Returns:
            The matching customer, or None if there is none
        """
        for customer in customers:
            if customer.nif == nif:
                return customer
        self.logger.debug(f"No customer found with NIF {nif}")
        return None
