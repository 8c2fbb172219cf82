"""
Interfaces (abstract base classes) for the asset ledger engine.

These define the contracts the hosting runtime must implement:
- LedgerAccessor: Ordered key-value ledger access
- LedgerScan: Closable ascending range scan returned by the accessor
"""

from asset_ledger.interfaces.ledger_accessor import LedgerAccessor, LedgerScan

__all__ = [
    "LedgerAccessor",
    "LedgerScan",
]
