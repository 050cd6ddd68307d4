"""Exception classes for tielog.

Precondition violations raise immediately without touching any state.
Requests that are merely incompatible with the current state are reported
through NetworkStatus instead.
"""

from __future__ import annotations

from typing import Any


class TielogError(Exception):
    """Base exception for tielog errors."""

    pass


class MissingArgumentError(TielogError, TypeError):
    """Raised when a required argument is None."""

    pass


class InvalidArgumentError(TielogError, TypeError):
    """Raised when an argument has the wrong shape, e.g. a string where ids are expected."""

    pass


class UninitializedObjectError(TielogError):
    """Raised when a link or participant is used before it has an identity."""

    pass


def require(**arguments: Any) -> None:
    """Raise MissingArgumentError naming the first argument that is None."""
    for name, value in arguments.items():
        if value is None:
            raise MissingArgumentError(f"{name} must not be None")


def require_valid(is_valid: bool, what: str) -> None:
    """Raise UninitializedObjectError when an object has not been initialized."""
    if not is_valid:
        raise UninitializedObjectError(f"{what} is not initialized")


def require_ids(ids: Any) -> list[Any]:
    """Materialize a collection of participant ids.

    A bare string is rejected rather than split into characters.

    Raises:
        MissingArgumentError: If ids is None
        InvalidArgumentError: If ids is a string
    """
    require(ids=ids)
    if isinstance(ids, (str, bytes)):
        raise InvalidArgumentError(f"ids must be a collection of ids, not a single {type(ids).__name__}")
    return list(ids)
