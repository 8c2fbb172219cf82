"""
Asset catalog management.

Provides:
- The asset record model and its ledger encoding
- Seed data for bootstrapping an empty ledger
- The asset service operating on a LedgerAccessor
"""

from asset_ledger.catalog.codec import decode_record, encode_record
from asset_ledger.catalog.models import AssetRecord
from asset_ledger.catalog.seed import get_seed_assets
from asset_ledger.catalog.service import AssetService

__all__ = [
    "AssetRecord",
    "AssetService",
    "decode_record",
    "encode_record",
    "get_seed_assets",
]
