"""
Path argument variants.

Public APIs accept loosely typed path arguments: strings, Path objects,
os.PathLike values, wrappers exposing get_path(), and arbitrarily nested
lists or tuples of those. They are classified exactly once, at the API
boundary, into a closed set of fragment types; the combine algorithm in
posixfs.path only ever consumes fragments.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Tuple, Union

from .errors import InvalidPathArgument

__all__ = ["Text", "Ref", "Group", "Fragment", "to_fragment", "to_fragments"]


@dataclass(frozen=True, slots=True)
class Text:
    """A literal path string supplied by the caller."""
    text: str


@dataclass(frozen=True, slots=True)
class Ref:
    """The string of an existing, already normalized path value."""
    text: str


@dataclass(frozen=True, slots=True)
class Group:
    """A nested sequence of fragments, combined as a unit."""
    items: Tuple["Fragment", ...]


Fragment = Union[Text, Ref, Group]


def to_fragment(value: Any) -> Fragment:
    """
    Classify a single path argument.

    Args:
        value: str, Path, os.PathLike, object with get_path(), list or tuple

    Returns:
        The matching fragment

    Raises:
        InvalidPathArgument: For any other type (including bytes paths)
    """
    from .path import Path

    if isinstance(value, (Text, Ref, Group)):
        return value
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, Path):
        return Ref(value.get())
    if isinstance(value, (list, tuple)):
        return Group(to_fragments(value))

    getter = getattr(value, "get_path", None)
    if callable(getter):
        return to_fragment(getter())

    if isinstance(value, os.PathLike):
        text = os.fspath(value)
        if isinstance(text, str):
            return Text(text)

    raise InvalidPathArgument(value)


def to_fragments(values: Any) -> Tuple[Fragment, ...]:
    return tuple(to_fragment(v) for v in values)
