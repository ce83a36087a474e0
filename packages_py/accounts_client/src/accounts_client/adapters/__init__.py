"""
Transport adapters for accounts_client.
"""
from .httpx_transport import HttpxTransport

__all__ = [
    "HttpxTransport",
]
