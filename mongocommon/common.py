"""Read preferences, write concerns and option merging shared across the client."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


class ArgumentError(ValueError):
    """Raised when an argument cannot be interpreted."""


class ReadMode(enum.Enum):
    """How a server should be selected during read operations."""

    PRIMARY = "Primary"
    PRIMARY_PREFERRED = "PrimaryPreferred"
    SECONDARY = "Secondary"
    SECONDARY_PREFERRED = "SecondaryPreferred"
    NEAREST = "Nearest"

    def __str__(self) -> str:
        return self.value


def parse_read_mode(text: str) -> ReadMode:
    """Return the ReadMode whose name is exactly ``text``."""
    try:
        return ReadMode(text)
    except ValueError:
        raise ArgumentError(f"Could not convert '{text}' to ReadMode.") from None


@dataclass(frozen=True)
class ReadPreference:
    """A read mode together with the tag sets used to filter servers."""

    mode: ReadMode
    tag_sets: tuple[dict[str, str], ...] = field(default_factory=tuple)

    def __init__(
        self,
        mode: ReadMode,
        tag_sets: Iterable[Mapping[str, str]] | None = None,
    ) -> None:
        sets = tuple(dict(sorted(tags.items())) for tags in (tag_sets or ()))
        object.__setattr__(self, "mode", mode)
        object.__setattr__(self, "tag_sets", sets)

    def __hash__(self) -> int:
        return hash((self.mode, tuple(tuple(tags.items()) for tags in self.tag_sets)))

    def to_document(self) -> dict[str, Any]:
        """Return the preference as a command document."""
        return {
            "mode": self.mode.value.lower(),
            "tag_sets": [dict(tags) for tags in self.tag_sets],
        }


@dataclass(frozen=True)
class WriteConcern:
    """Acknowledgement requirements for write operations."""

    w: int = 1
    w_timeout: int = 0
    j: bool = False
    fsync: bool = False

    def to_bson(self) -> dict[str, Any]:
        """Return the write concern as a command document."""
        return {"w": self.w, "wtimeout": self.w_timeout, "j": self.j}


def merge_options(document: Mapping[str, Any], options: Any) -> dict[str, Any]:
    """Return ``document`` extended by ``options``; option values win on clashes.

    ``options`` may be a mapping or an object offering ``to_document()`` or
    ``to_bson()``.
    """
    if isinstance(options, Mapping):
        options_doc = options
    elif hasattr(options, "to_document"):
        options_doc = options.to_document()
    elif hasattr(options, "to_bson"):
        options_doc = options.to_bson()
    else:
        raise ArgumentError(f"Cannot convert {type(options).__name__} to a document.")
    merged = dict(document)
    merged.update(options_doc)
    return merged