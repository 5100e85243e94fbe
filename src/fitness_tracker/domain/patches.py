"""Sentinel for partial updates."""

from enum import Enum
from typing import Literal, TypeAlias


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset.UNSET
Unset: TypeAlias = Literal[_Unset.UNSET]


def is_set(value: object) -> bool:
    """Return True when a patch field was supplied by the caller."""
    return value is not UNSET
