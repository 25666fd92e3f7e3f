"""Argument and limit checks shared by the builders."""

from typing import Optional, TypeVar

from modules.block_kit.exceptions import (
    InvalidArgumentError,
    StructuralLimitExceededError,
)

T = TypeVar("T")

MAX_BLOCK_ID_LENGTH = 255


def require(value: Optional[T], name: str) -> T:
    """Return ``value`` or raise InvalidArgumentError when it is None."""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None", argument=name)
    return value


def require_text(value: Optional[str], name: str) -> str:
    """Return ``value`` or raise InvalidArgumentError when it is None or empty."""
    if not value:
        raise InvalidArgumentError(
            f"{name} must not be None or empty", argument=name
        )
    return value


def check_block_id(block_id: Optional[str], block_kind: str) -> None:
    """Raise StructuralLimitExceededError for block ids over 255 characters."""
    if block_id is not None and len(block_id) > MAX_BLOCK_ID_LENGTH:
        raise StructuralLimitExceededError(
            f"{block_kind} block_id cannot be longer than "
            f"{MAX_BLOCK_ID_LENGTH} characters",
            limit_name="block_id",
            limit=MAX_BLOCK_ID_LENGTH,
        )


def check_count(count: int, limit: int, block_kind: str, what: str) -> None:
    """Raise StructuralLimitExceededError when ``count`` exceeds ``limit``."""
    if count > limit:
        raise StructuralLimitExceededError(
            f"{block_kind} block cannot have more than {limit} {what}",
            limit_name=what,
            limit=limit,
        )
