"""Exceptions raised by payrollcache."""


class PayrollCacheError(Exception):
    """Base class for payrollcache errors."""

    pass


class RemoteStoreError(PayrollCacheError):
    """Raised when the remote store rejects or fails a call."""

    def __init__(self, message: str, table: str | None = None) -> None:
        super().__init__(message)
        self.table = table


class SnapshotError(PayrollCacheError):
    """Raised when the fallback snapshot cannot be read or written."""

    pass


class SerializationError(SnapshotError):
    """Raised when serialization or deserialization fails."""

    pass
