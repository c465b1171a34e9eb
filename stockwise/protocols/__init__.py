"""
StockWise Protocols.

Defines interfaces for external system integration.
"""

from stockwise.protocols.identity import IdentityBackend, IdentityRecord

__all__ = [
    "IdentityBackend",
    "IdentityRecord",
]
