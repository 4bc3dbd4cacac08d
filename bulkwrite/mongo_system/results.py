import logging
from typing import Iterable, Sequence

from pymongo.results import BulkWriteResult as PymongoBulkWriteResult

from bulkwrite.interface.errors import InvalidArgument
from bulkwrite.interface.fields import OperationType, PyMongoOperations, UpsertRecord
from bulkwrite.interface.results import (
    WRITE_OUTCOMES,
    AcknowledgedResult,
    UnacknowledgedResult,
)

logger = logging.getLogger(__name__)


def from_pymongo(result: PymongoBulkWriteResult) -> WRITE_OUTCOMES:
    """Convert a pymongo bulk write result into a write outcome.

    pymongo reports counts already aggregated over every operation type in
    the batch, so the four-count constructor is used. Updated documents are
    the ones matched by update and replace requests.
    """
    if not result.acknowledged:
        logger.debug("Converted unacknowledged bulk write result")
        return UnacknowledgedResult()

    upserted = result.bulk_api_result.get("upserted", [])
    upserts = sorted(
        (UpsertRecord.model_validate(upsert) for upsert in upserted),
        key=lambda upsert: upsert.index,
    )
    outcome = AcknowledgedResult(
        inserted_count=result.inserted_count,
        updated_count=result.matched_count,
        removed_count=result.deleted_count,
        modified_count=result.modified_count,
        upserts=upserts,
    )
    logger.debug("Converted acknowledged bulk write result: %s", outcome)
    return outcome


def from_batch(
    requests: Sequence[PyMongoOperations],
    count: int,
    upserts: Iterable[UpsertRecord],
    modified_count: int = 0,
) -> AcknowledgedResult:
    """Build the outcome of a batch holding a single kind of request."""
    operation_types = {OperationType.from_request(request) for request in requests}
    if len(operation_types) != 1:
        names = sorted(operation_type.value for operation_type in operation_types)
        raise InvalidArgument(
            f"Expected a single operation type in batch, got {names}.",
            argument="requests",
        )

    (operation_type,) = operation_types
    logger.debug(
        "Building %s outcome for %d requests", operation_type.value, len(requests)
    )
    return AcknowledgedResult.from_operation(
        operation_type,
        count,
        upserts,
        modified_count=modified_count,
    )
