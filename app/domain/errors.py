"""Counter store error taxonomy."""


class CounterStoreError(Exception):
    """Base class for failures of the counter store."""

    code = "counter_store_error"


class StorageUnavailable(CounterStoreError):
    """The backing storage could not be read or written."""

    code = "storage_unavailable"


class MalformedStoredValue(CounterStoreError):
    """The stored content is not a non-negative decimal integer."""

    code = "malformed_stored_value"

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Stored counter value is not a non-negative integer: {raw!r}")
