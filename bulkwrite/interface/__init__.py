from .errors import (
    BulkWriteResultError,
    InvalidArgument,
    UnacknowledgedWrite,
    UnsupportedOperation,
)
from .fields import OperationType, PyMongoOperations, UpsertRecord
from .results import (
    WRITE_OUTCOMES,
    AcknowledgedResult,
    UnacknowledgedResult,
    WriteOutcome,
)
