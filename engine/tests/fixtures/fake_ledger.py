"""
Deterministic in-memory ledger for tests.

Satisfies the LedgerAccessor interface used by AssetService without any
real store behind it. Keys are kept in byte-wise ascending order, like an
ordered key-value ledger.
"""

from asset_ledger.interfaces import LedgerAccessor, LedgerScan


class FakeLedgerScan(LedgerScan):
    """Scan over a snapshot of the fake ledger's entries."""

    def __init__(self, entries: list[tuple[str, bytes]], ledger: "FakeLedger") -> None:
        self._entries = iter(entries)
        self._ledger = ledger
        self.closed = False
        self.close_count = 0

    def __next__(self) -> tuple[str, bytes]:
        if self.closed:
            raise RuntimeError("scan used after close")
        return next(self._entries)

    def close(self) -> None:
        self.closed = True
        self.close_count += 1


class FakeLedger(LedgerAccessor):
    """
    Fake ordered key-value ledger.

    Records every call in `calls` and every scan it hands out in `scans`.
    """

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._state: dict[str, bytes] = dict(initial or {})
        self.calls: list[tuple[str, str | None]] = []
        self.scans: list[FakeLedgerScan] = []

    # -- Inspection --

    @property
    def state(self) -> dict[str, bytes]:
        """Copy of the raw stored values."""
        return dict(self._state)

    def keys(self) -> list[str]:
        """Stored keys in ledger order."""
        return sorted(self._state, key=lambda k: k.encode("utf-8"))

    def raw_put(self, key: str, value: bytes) -> None:
        """Write bytes directly, bypassing the call log."""
        self._state[key] = value

    def calls_to(self, method: str) -> int:
        """Number of logged calls to a method."""
        return sum(1 for name, _ in self.calls if name == method)

    # -- LedgerAccessor interface --

    def get(self, key: str) -> bytes | None:
        self.calls.append(("get", key))
        return self._state.get(key)

    def put(self, key: str, value: bytes) -> None:
        self.calls.append(("put", key))
        self._state[key] = value

    def delete(self, key: str) -> None:
        self.calls.append(("delete", key))
        self._state.pop(key, None)

    def scan_all(self) -> FakeLedgerScan:
        self.calls.append(("scan_all", None))
        scan = FakeLedgerScan([(k, self._state[k]) for k in self.keys()], self)
        self.scans.append(scan)
        return scan
