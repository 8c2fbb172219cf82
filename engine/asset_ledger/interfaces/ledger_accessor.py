"""
LedgerAccessor interface.

Defines the contract for the ordered key-value ledger that stores assets.
"""

from abc import ABC, abstractmethod
from types import TracebackType


class LedgerScan(ABC):
    """
    Closable iterator over (key, value) pairs in ascending key order.

    Implementations hold a store-side cursor; close() must release it and
    must be safe to call more than once.
    """

    def __iter__(self) -> "LedgerScan":
        return self

    @abstractmethod
    def __next__(self) -> tuple[str, bytes]:
        """
        Get the next entry of the scan.

        Returns:
            (key, value) pair

        Raises:
            StopIteration: When the scan is exhausted
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the scan cursor."""
        pass

    def __enter__(self) -> "LedgerScan":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class LedgerAccessor(ABC):
    """
    Abstract base class for ledger access.

    A handle is supplied by the host for each invocation. Transactional
    commit/rollback around the invocation is the host's responsibility.
    """

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """
        Read the value stored at a key.

        Args:
            key: Ledger key

        Returns:
            Stored bytes, or None/empty bytes if the key is absent.
        """
        pass

    @abstractmethod
    def put(self, key: str, value: bytes) -> None:
        """
        Write a value at a key, replacing any previous value.

        Args:
            key: Ledger key
            value: Bytes to store
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key from the ledger.

        Args:
            key: Ledger key
        """
        pass

    @abstractmethod
    def scan_all(self) -> LedgerScan:
        """
        Open an open-ended range scan over every key.

        Returns:
            Scan yielding (key, value) pairs in ascending key order.
        """
        pass
