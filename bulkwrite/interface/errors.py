class BulkWriteResultError(Exception):
    """Base class for all bulkwrite errors."""

    def __init__(self, *args: object, argument: str = "") -> None:
        super().__init__(*args)
        self.argument = argument


class InvalidArgument(BulkWriteResultError, ValueError):
    def __init__(self, *args: object, argument: str = "") -> None:
        if not args and argument:
            args = (f"{argument} can not be None",)
        super().__init__(*args, argument=argument)


class UnacknowledgedWrite(BulkWriteResultError):
    def __init__(self, *args: object, argument: str = "") -> None:
        if argument:
            msg = f"Cannot get {argument} of an unacknowledged write"
        else:
            msg = "No outcome is available for an unacknowledged write"
        super().__init__(msg, *args, argument=argument)


class UnsupportedOperation(BulkWriteResultError):
    pass
