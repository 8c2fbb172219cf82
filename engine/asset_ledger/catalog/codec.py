"""
Byte encoding of asset records for ledger storage.

Records are stored as UTF-8 JSON objects keyed by field name. Decimal values
are written as strings so they round-trip without float loss.
"""

from pydantic import ValidationError

from asset_ledger.catalog.models import STORED_CONTEXT, AssetRecord
from asset_ledger.errors import MalformedRecordError


def encode_record(record: AssetRecord) -> bytes:
    """
    Encode a record for storage.

    Args:
        record: Record to encode

    Returns:
        UTF-8 JSON bytes
    """
    return record.model_dump_json().encode("utf-8")


def decode_record(raw: bytes, key: str | None = None) -> AssetRecord:
    """
    Decode stored bytes back into a record.

    Decoding is strict: only the exact shape written by encode_record is
    accepted, and a record stored under a key must carry that key as its id.

    Args:
        raw: Bytes previously produced by encode_record
        key: Ledger key the bytes were read from

    Returns:
        Decoded record

    Raises:
        MalformedRecordError: If the bytes are not a valid encoded record,
            or their id does not match the key
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedRecordError(f"not valid UTF-8 ({e.reason})", key=key) from e

    try:
        record = AssetRecord.model_validate_json(
            text, strict=True, context={STORED_CONTEXT: True}
        )
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise MalformedRecordError(errors, key=key) from e

    if key is not None and record.id != key:
        raise MalformedRecordError(f"embedded id {record.id!r} does not match key", key=key)
    return record
