"""Named option/argument pairs passed from commands to actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

InputValue = str | bool | None


@dataclass(frozen=True)
class Input:
    """A single ``{name, value}`` pair."""

    name: str
    value: InputValue = None


def find_input(inputs: Iterable[Input], name: str) -> Input | None:
    """Return the first input called *name*, or ``None``."""
    for item in inputs:
        if item.name == name:
            return item
    return None


def get_string(inputs: Iterable[Input], name: str) -> str | None:
    """Return the value of *name* as a non-empty string, or ``None``.

    Booleans and empty strings count as absent.
    """
    item = find_input(inputs, name)
    if item is None or not isinstance(item.value, str) or not item.value:
        return None
    return item.value


def get_flag(inputs: Iterable[Input], name: str) -> bool:
    """Return ``True`` only when *name* is present with a truthy value."""
    item = find_input(inputs, name)
    return bool(item is not None and item.value)
