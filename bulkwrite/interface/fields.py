from enum import Enum
from typing import Any, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pymongo.operations import (
    DeleteMany,
    DeleteOne,
    InsertOne,
    ReplaceOne,
    UpdateMany,
    UpdateOne,
)

from .errors import UnsupportedOperation

PyMongoOperations = TypeVar(
    "PyMongoOperations",
    bound=Union[
        InsertOne,
        DeleteOne,
        DeleteMany,
        ReplaceOne,
        UpdateOne,
        UpdateMany,
    ],
)


class OperationType(Enum):
    INSERT = "insert"
    UPDATE = "update"
    REPLACE = "replace"
    REMOVE = "remove"

    @classmethod
    def from_string(
        cls, query: Literal["insert", "update", "replace", "remove"]
    ) -> "OperationType":
        if query == "insert":
            return cls.INSERT
        elif query == "update":
            return cls.UPDATE
        elif query == "replace":
            return cls.REPLACE
        elif query == "remove":
            return cls.REMOVE
        else:
            raise ValueError(f"Invalid operation type: {query}.")

    @classmethod
    def from_request(cls, request: PyMongoOperations) -> "OperationType":
        if isinstance(request, InsertOne):
            return cls.INSERT
        elif isinstance(request, (UpdateOne, UpdateMany)):
            return cls.UPDATE
        elif isinstance(request, ReplaceOne):
            return cls.REPLACE
        elif isinstance(request, (DeleteOne, DeleteMany)):
            return cls.REMOVE
        raise UnsupportedOperation(
            f"Unsupported write request: {type(request).__name__}."
        )


class UpsertRecord(BaseModel):
    """A document created by an upsert, with its position in the batch."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    index: int
    generated_id: Any = Field(alias="_id")

    def __hash__(self) -> int:
        return hash((self.index, _freeze(self.generated_id)))


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return frozenset((key, _freeze(item)) for key, item in value.items())
    elif isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    elif isinstance(value, set):
        return frozenset(_freeze(item) for item in value)
    return value
