from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidArgument, UnacknowledgedWrite
from .fields import OperationType, UpsertRecord


class WriteOutcome(ABC):
    """Outcome of a bulk write, acknowledged by the server or not."""

    @abstractmethod
    def is_acknowledged(self) -> bool:
        pass

    @property
    def acknowledged(self) -> bool:
        return self.is_acknowledged()


@dataclass(frozen=True)
class AcknowledgedResult(WriteOutcome):
    """Counts and upserts reported back for an acknowledged bulk write.

    The four-count constructor accepts any combination of counts, for
    results already aggregated across operation types. Use
    `from_operation` when the whole batch had a single operation type.
    """

    inserted_count: int
    updated_count: int
    removed_count: int
    modified_count: int
    upserts: tuple[UpsertRecord, ...]

    def __post_init__(self) -> None:
        if self.upserts is None:
            raise InvalidArgument(argument="upserts")
        object.__setattr__(self, "upserts", tuple(self.upserts))

    @classmethod
    def from_operation(
        cls,
        operation_type: OperationType | str,
        count: int,
        upserts: Iterable[UpsertRecord],
        modified_count: int = 0,
    ) -> "AcknowledgedResult":
        if not isinstance(operation_type, OperationType):
            try:
                operation_type = OperationType.from_string(operation_type)
            except ValueError as e:
                raise InvalidArgument(
                    f"Unknown operation type: {operation_type!r}.",
                    argument="operation_type",
                ) from e

        inserted_count = updated_count = removed_count = 0
        if operation_type == OperationType.INSERT:
            inserted_count = count
        elif operation_type in (OperationType.UPDATE, OperationType.REPLACE):
            updated_count = count
        elif operation_type == OperationType.REMOVE:
            removed_count = count

        return cls(
            inserted_count=inserted_count,
            updated_count=updated_count,
            removed_count=removed_count,
            modified_count=modified_count,
            upserts=upserts,
        )

    def is_acknowledged(self) -> bool:
        return True

    def __hash__(self) -> int:
        result = hash(self.upserts)
        for count in (
            self.inserted_count,
            self.updated_count,
            self.removed_count,
            self.modified_count,
        ):
            result = 31 * result + count
        return result


@dataclass(frozen=True)
class UnacknowledgedResult(WriteOutcome):
    """A bulk write sent without asking the server for its outcome."""

    def is_acknowledged(self) -> bool:
        return False

    @property
    def inserted_count(self) -> int:
        raise UnacknowledgedWrite(argument="inserted_count")

    @property
    def updated_count(self) -> int:
        raise UnacknowledgedWrite(argument="updated_count")

    @property
    def removed_count(self) -> int:
        raise UnacknowledgedWrite(argument="removed_count")

    @property
    def modified_count(self) -> int:
        raise UnacknowledgedWrite(argument="modified_count")

    @property
    def upserts(self) -> tuple[UpsertRecord, ...]:
        raise UnacknowledgedWrite(argument="upserts")


WRITE_OUTCOMES = AcknowledgedResult | UnacknowledgedResult
