from .interface import (
    WRITE_OUTCOMES,
    AcknowledgedResult,
    BulkWriteResultError,
    InvalidArgument,
    OperationType,
    UnacknowledgedResult,
    UnacknowledgedWrite,
    UnsupportedOperation,
    UpsertRecord,
    WriteOutcome,
)
