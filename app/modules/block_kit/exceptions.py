"""Custom exceptions for the Block Kit builders.

Every builder error is raised synchronously to the caller before any
output is produced. ``build()`` never returns a partial result.
"""

from typing import Optional


class BlockKitError(Exception):
    """Base exception for all Block Kit builder errors.

    Example:
        try:
            blocks = builder.build()
        except BlockKitError as e:
            logger.error("block_kit_error", error=str(e))
    """

    pass


class InvalidArgumentError(BlockKitError, ValueError):
    """Raised when a required argument is missing or empty.

    Raised before the builder mutates anything.

    Example:
        >>> BlockBuilder.create().add_block(None)
        Traceback (most recent call last):
        ...
        InvalidArgumentError: block must not be None
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class StructuralLimitExceededError(BlockKitError):
    """Raised when a container block violates a Slack structural limit.

    Attributes:
        limit_name: Name of the violated limit (e.g. ``"elements"``)
        limit: The threshold that was exceeded

    Example:
        >>> actions_builder.build()  # with 26 elements
        Traceback (most recent call last):
        ...
        StructuralLimitExceededError: Actions block cannot have more than 25 elements
    """

    def __init__(self, message: str, limit_name: str, limit: int):
        super().__init__(message)
        self.limit_name = limit_name
        self.limit = limit


class TooManyFocusedElementsError(BlockKitError):
    """Raised when more than one element in a layout is focused on load.

    Attributes:
        count: Number of focused elements found

    Example:
        >>> builder.build()
        Traceback (most recent call last):
        ...
        TooManyFocusedElementsError: Only one element can be focused on load, found 2
    """

    def __init__(self, message: str, count: int):
        super().__init__(message)
        self.count = count
