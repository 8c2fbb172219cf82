"""
Asset catalog service.

Business logic for assets kept in an ordered key-value ledger. Every
operation receives the ledger handle for the current invocation; the
service itself holds no state between calls.
"""

from collections.abc import Callable, Iterator
from decimal import Decimal
from typing import TypeVar

from pydantic import ValidationError

from asset_ledger.catalog.codec import decode_record, encode_record
from asset_ledger.catalog.models import AssetRecord
from asset_ledger.catalog.seed import get_seed_assets
from asset_ledger.errors import (
    AssetAlreadyExistsError,
    AssetNotFoundError,
    InvalidRecordError,
    StoreUnavailableError,
)
from asset_ledger.interfaces import LedgerAccessor, LedgerScan
from asset_ledger.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _store_call(operation: str, key: str | None, fn: Callable[[], T]) -> T:
    """Run one accessor call, surfacing any failure as StoreUnavailableError."""
    try:
        return fn()
    except (StoreUnavailableError, StopIteration):
        raise
    except Exception as e:
        logger.error("Ledger %s failed for %s: %s", operation, key or "full range", e)
        raise StoreUnavailableError(operation, key, e) from e


def _build_record(
    asset_id: str,
    name: str,
    creator: str,
    value: Decimal | float | str,
    quantity: int,
    holder: str,
) -> AssetRecord:
    try:
        return AssetRecord(
            id=asset_id,
            name=name,
            creator=creator,
            value=value,
            quantity=quantity,
            holder=holder,
        )
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidRecordError(asset_id, errors) from e


class AssetService:
    """
    Asset management operations on top of a LedgerAccessor.

    Mutating operations gate on an existence check that is re-read from
    the ledger on every call. The first failure is raised and no further
    ledger calls are made.
    """

    # =========================================================================
    # Low-level ledger access
    # =========================================================================

    def _read(self, ledger: LedgerAccessor, asset_id: str) -> bytes | None:
        raw = _store_call("get", asset_id, lambda: ledger.get(asset_id))
        return raw or None

    def _write(self, ledger: LedgerAccessor, asset_id: str, record: AssetRecord) -> None:
        payload = encode_record(record)
        _store_call("put", asset_id, lambda: ledger.put(asset_id, payload))

    # =========================================================================
    # Operations
    # =========================================================================

    def init_catalog(self, ledger: LedgerAccessor) -> None:
        """
        Write the seed assets to the ledger.

        Existing values at seed ids are overwritten. Writes happen one at a
        time in seed order; on failure, earlier writes are left in place.

        Args:
            ledger: Ledger handle for this invocation

        Raises:
            StoreUnavailableError: If any write fails
        """
        seeds = get_seed_assets()
        for written, record in enumerate(seeds):
            try:
                self._write(ledger, record.id, record)
            except StoreUnavailableError:
                logger.error(
                    "Catalog init aborted at %s after %d of %d assets",
                    record.id,
                    written,
                    len(seeds),
                )
                raise

        logger.info("Catalog initialized with %d seed assets", len(seeds))

    def asset_exists(self, ledger: LedgerAccessor, asset_id: str) -> bool:
        """
        Check whether an asset is stored under an id.

        Args:
            ledger: Ledger handle for this invocation
            asset_id: Asset id

        Returns:
            True if a non-empty value is stored at the id

        Raises:
            StoreUnavailableError: If the ledger read fails
        """
        exists = self._read(ledger, asset_id) is not None
        logger.debug("Asset %s exists: %s", asset_id, exists)
        return exists

    def create_asset(
        self,
        ledger: LedgerAccessor,
        asset_id: str,
        name: str,
        creator: str,
        value: Decimal | float | str,
        quantity: int,
        holder: str,
    ) -> None:
        """
        Create a new asset.

        Raises:
            AssetAlreadyExistsError: If the id is already stored
            InvalidRecordError: If the arguments do not form a valid record
            StoreUnavailableError: If a ledger call fails
        """
        if self.asset_exists(ledger, asset_id):
            logger.warning("Create rejected, asset %s already exists", asset_id)
            raise AssetAlreadyExistsError(asset_id)

        record = _build_record(asset_id, name, creator, value, quantity, holder)
        self._write(ledger, asset_id, record)
        logger.info("Created asset %s held by %s", asset_id, holder)

    def query_asset(self, ledger: LedgerAccessor, asset_id: str) -> AssetRecord:
        """
        Read an asset.

        Args:
            ledger: Ledger handle for this invocation
            asset_id: Asset id

        Returns:
            Stored record

        Raises:
            AssetNotFoundError: If nothing is stored at the id
            MalformedRecordError: If the stored bytes do not decode or carry another id
            StoreUnavailableError: If the ledger read fails
        """
        raw = self._read(ledger, asset_id)
        if raw is None:
            raise AssetNotFoundError(asset_id)
        return decode_record(raw, key=asset_id)

    def update_asset(
        self,
        ledger: LedgerAccessor,
        asset_id: str,
        name: str,
        creator: str,
        value: Decimal | float | str,
        quantity: int,
        holder: str,
    ) -> None:
        """
        Replace an existing asset with a record built from all arguments.

        Nothing is carried over from the stored value; callers supply the
        complete desired state.

        Raises:
            AssetNotFoundError: If nothing is stored at the id
            InvalidRecordError: If the arguments do not form a valid record
            StoreUnavailableError: If a ledger call fails
        """
        if not self.asset_exists(ledger, asset_id):
            logger.warning("Update rejected, asset %s does not exist", asset_id)
            raise AssetNotFoundError(asset_id)

        record = _build_record(asset_id, name, creator, value, quantity, holder)
        self._write(ledger, asset_id, record)
        logger.info("Updated asset %s", asset_id)

    def delete_asset(self, ledger: LedgerAccessor, asset_id: str) -> None:
        """
        Delete an existing asset.

        Raises:
            AssetNotFoundError: If nothing is stored at the id
            StoreUnavailableError: If a ledger call fails
        """
        if not self.asset_exists(ledger, asset_id):
            logger.warning("Delete rejected, asset %s does not exist", asset_id)
            raise AssetNotFoundError(asset_id)

        _store_call("delete", asset_id, lambda: ledger.delete(asset_id))
        logger.info("Deleted asset %s", asset_id)

    def transfer_asset(
        self,
        ledger: LedgerAccessor,
        asset_id: str,
        new_holder: str,
    ) -> AssetRecord:
        """
        Hand an asset to a new holder, keeping every other field.

        Args:
            ledger: Ledger handle for this invocation
            asset_id: Asset id
            new_holder: Holder after the transfer

        Returns:
            The record as written

        Raises:
            AssetNotFoundError: If nothing is stored at the id
            MalformedRecordError: If the stored bytes do not decode or carry another id
            StoreUnavailableError: If a ledger call fails
        """
        current = self.query_asset(ledger, asset_id)
        updated = current.with_holder(new_holder)
        self._write(ledger, asset_id, updated)
        logger.info(
            "Transferred asset %s from %s to %s", asset_id, current.holder, new_holder
        )
        return updated

    def enumerate_assets(self, ledger: LedgerAccessor) -> Iterator[AssetRecord]:
        """
        Lazily yield every stored asset in ascending key order.

        The scan is opened on first iteration and closed when the generator
        finishes, fails, or is closed by the caller. A value that does not
        decode ends the sequence with MalformedRecordError.

        Args:
            ledger: Ledger handle for this invocation

        Yields:
            Decoded records

        Raises:
            MalformedRecordError: If a stored value does not decode
            StoreUnavailableError: If the scan fails
        """
        scan: LedgerScan = _store_call("scan_all", None, ledger.scan_all)
        count = 0
        with scan:
            while True:
                try:
                    key, raw = _store_call("scan_next", None, lambda: next(scan))
                except StopIteration:
                    break
                # Empty values are absent keys, same as for asset_exists
                if not raw:
                    continue
                yield decode_record(raw, key=key)
                count += 1

        logger.debug("Enumerated %d assets", count)

    def query_all_assets(self, ledger: LedgerAccessor) -> list[AssetRecord]:
        """
        Get every stored asset in ascending key order.

        Args:
            ledger: Ledger handle for this invocation

        Returns:
            List of records
        """
        return list(self.enumerate_assets(ledger))
