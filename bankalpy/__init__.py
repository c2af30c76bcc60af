"""
Bankalpy

A small retail-banking domain model: customers, accounts, transactions and
loans, with a service layer for customer/account relationship management.
"""

__version__ = "1.0.0"
