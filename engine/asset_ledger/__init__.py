"""
Asset Ledger Engine

Asset catalog logic over an ordered key-value ledger:
- Existence-checked create/query/update/delete
- Ownership transfer
- Seed catalog initialization
- Full-range enumeration
"""

__version__ = "0.1.0"
__author__ = "Asset Ledger Development Team"

from asset_ledger.config import Settings, get_settings

__all__ = ["__version__", "Settings", "get_settings"]
