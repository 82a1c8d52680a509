"""
Extraction Result Models.

Value objects returned by file extraction.

- ObjectPath: dot-notation address of a node in an object tree
  (``"variables.files.0"`` is key ``variables``, key ``files``, index ``0``)
- FileIdentityMap: insertion-ordered map keyed by object identity
- Extraction: clone plus extracted files
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar


ObjectPath = str

T = TypeVar("T")


class FileIdentityMap(Generic[T]):
    """
    Ordered mapping from extracted values to their object paths.

    Keys compare by identity (``is``), not by equality, so two distinct
    values with equal content stay separate entries. Entries keep a strong
    reference to their key so its ``id`` cannot be recycled while the map
    is alive.

    Iteration yields ``(value, paths)`` pairs in first-seen order.
    """

    def __init__(self):
        self._entries: Dict[int, Tuple[T, List[ObjectPath]]] = {}

    def add(self, value: T, path: ObjectPath) -> None:
        """Record one more path for value."""
        entry = self._entries.get(id(value))
        if entry is None:
            self._entries[id(value)] = (value, [path])
        else:
            entry[1].append(path)

    def get(self, value: Any, default: Optional[List[ObjectPath]] = None) -> Optional[List[ObjectPath]]:
        entry = self._entries.get(id(value))
        if entry is None or entry[0] is not value:
            return default
        return entry[1]

    def __getitem__(self, value: Any) -> List[ObjectPath]:
        paths = self.get(value)
        if paths is None:
            raise KeyError(value)
        return paths

    def __contains__(self, value: Any) -> bool:
        return self.get(value) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[Tuple[T, List[ObjectPath]]]:
        return iter(list(self._entries.values()))

    def items(self) -> List[Tuple[T, List[ObjectPath]]]:
        return list(self._entries.values())

    def keys(self) -> List[T]:
        return [value for value, _ in self._entries.values()]

    def values(self) -> List[List[ObjectPath]]:
        return [paths for _, paths in self._entries.values()]

    def __repr__(self) -> str:
        inner = ", ".join(f"{value!r}: {paths!r}" for value, paths in self._entries.values())
        return f"FileIdentityMap({{{inner}}})"


@dataclass(frozen=True)
class Extraction(Generic[T]):
    """
    Result of extracting files from a value.

    Attributes:
        clone: Deep clone of the value with extracted files replaced by None
        files: Extracted files and their object paths within the value
    """
    clone: Any
    files: FileIdentityMap[T] = field(default_factory=FileIdentityMap)

    @property
    def has_files(self) -> bool:
        return len(self.files) > 0

    def to_map(self) -> Dict[str, List[ObjectPath]]:
        """
        Build the multipart ``map`` field.

        Keys are 1-based indices in files iteration order, values are the
        path lists.
        """
        return {str(index): list(paths) for index, paths in enumerate(self.files.values(), start=1)}


__all__ = [
    "ObjectPath",
    "FileIdentityMap",
    "Extraction",
]
