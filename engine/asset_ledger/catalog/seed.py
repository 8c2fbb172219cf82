"""
Seed data for the asset catalog.

Defines the books written by InitCatalog, in write order.
"""

from decimal import Decimal

from asset_ledger.catalog.models import AssetRecord

# =============================================================================
# SEED DATA: Library books
# =============================================================================

SEED_HOLDER = "library"

SEED_ASSETS: list[AssetRecord] = [
    AssetRecord(
        id="1001",
        name="西游记",
        creator="吴承恩",
        value=Decimal("39.9"),
        quantity=30,
        holder=SEED_HOLDER,
    ),
    AssetRecord(
        id="1002",
        name="水浒传",
        creator="施耐庵",
        value=Decimal("49.9"),
        quantity=20,
        holder=SEED_HOLDER,
    ),
    AssetRecord(
        id="1003",
        name="三国演义",
        creator="罗贯中",
        value=Decimal("29.9"),
        quantity=10,
        holder=SEED_HOLDER,
    ),
    AssetRecord(
        id="1004",
        name="红楼梦",
        creator="曹雪芹",
        value=Decimal("45.0"),
        quantity=50,
        holder=SEED_HOLDER,
    ),
    AssetRecord(
        id="1005",
        name="斗罗大陆",
        creator="唐家三少",
        value=Decimal("89.9"),
        quantity=5,
        holder=SEED_HOLDER,
    ),
]


def get_seed_assets() -> list[AssetRecord]:
    """Get the list of seed assets."""
    return SEED_ASSETS.copy()
