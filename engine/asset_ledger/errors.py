"""
Exceptions raised by the asset ledger engine.

All errors derive from AssetLedgerError so hosts can catch the whole family
at the invocation boundary.
"""


class AssetLedgerError(Exception):
    """Base class for asset ledger errors."""

    pass


class StoreUnavailableError(AssetLedgerError):
    """Raised when the ledger accessor fails to read or write."""

    def __init__(
        self,
        operation: str,
        key: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.operation = operation
        self.key = key
        self.cause = cause
        target = f"key {key!r}" if key is not None else "full range"
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"ledger {operation} failed for {target}{detail}")


class AssetNotFoundError(AssetLedgerError):
    """Raised when an operation needs an asset that is not in the ledger."""

    def __init__(self, asset_id: str) -> None:
        self.asset_id = asset_id
        super().__init__(f"the asset {asset_id} does not exist")


class AssetAlreadyExistsError(AssetLedgerError):
    """Raised when creating an asset whose id is already in the ledger."""

    def __init__(self, asset_id: str) -> None:
        self.asset_id = asset_id
        super().__init__(f"the asset {asset_id} already exists")


class MalformedRecordError(AssetLedgerError):
    """Raised when stored bytes do not decode to a valid asset record."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        prefix = f"malformed record at key {key!r}" if key is not None else "malformed record"
        super().__init__(f"{prefix}: {message}")


class InvalidRecordError(AssetLedgerError):
    """Raised when caller arguments cannot form a valid asset record."""

    def __init__(self, asset_id: str, message: str) -> None:
        self.asset_id = asset_id
        super().__init__(f"invalid asset {asset_id!r}: {message}")
