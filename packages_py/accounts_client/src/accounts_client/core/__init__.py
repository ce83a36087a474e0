"""
Core modules for accounts_client.
"""
from .accounts_client import AccountsClient
from .request_builder import (
    account_url,
    accounts_url,
    build_url,
    is_valid_uuid,
)

__all__ = [
    "AccountsClient",
    "account_url",
    "accounts_url",
    "build_url",
    "is_valid_uuid",
]
