"""Field mutations accepted by :meth:`DocumentStore.update`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class SetField:
    """Overwrite ``field`` with ``value``."""

    field: str
    value: Any


@dataclass(frozen=True)
class Increment:
    """Atomically add ``by`` to a numeric ``field``."""

    field: str
    by: int = 1


@dataclass(frozen=True)
class SetAdd:
    """Add ``value`` to the set ``field``; adding an existing member is a no-op."""

    field: str
    value: str


@dataclass(frozen=True)
class SetRemove:
    """Remove ``value`` from the set ``field``; removing a missing member is a no-op."""

    field: str
    value: str


FieldMutation = Union[SetField, Increment, SetAdd, SetRemove]


__all__ = ["FieldMutation", "Increment", "SetAdd", "SetField", "SetRemove"]
