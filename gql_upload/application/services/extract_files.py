"""
File Extraction Service.

Recursively extracts files and their object paths from a value, replacing
them with None in a deep clone without mutating the original value.

Cloned containers:
- list / tuple: cloned as list
- FileList: treated as a list of files, cloned as list
- dict (and subclasses): cloned as plain dict

Anything else that is not a file is returned as-is.

Reference handling:
- A container referenced more than once is cloned once and the clone is
  reused at every reference. Its children are still walked once per
  reference route so files below it get a path for every route.
- A container that contains itself is not walked again on the same branch;
  the clone produced so far is returned in its place.

Usage:
    from gql_upload.application.services import extract_files, is_extractable_file

    file1 = File(b"1", name="1.txt", content_type="text/plain")
    file2 = File(b"2", name="2.txt", content_type="text/plain")

    extraction = extract_files({"a": file1, "b": [file1, file2]}, is_extractable_file, "prefix")

    extraction.clone            # {"a": None, "b": [None, None]}
    extraction.files[file1]     # ["prefix.a", "prefix.b.0"]
    extraction.files[file2]     # ["prefix.b.1"]
"""

import logging
from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

from gql_upload.domain.interfaces.link import ExtractableFileMatcher
from gql_upload.domain.models.exceptions import ArgumentError
from gql_upload.domain.models.extraction import Extraction, FileIdentityMap, ObjectPath
from gql_upload.domain.models.files import FileList

logger = logging.getLogger(__name__)

_MISSING = object()

Clone = Union[list, dict]


def extract_files(
    value: Any = _MISSING,
    is_extractable: Optional[ExtractableFileMatcher] = None,
    path: ObjectPath = "",
) -> Extraction:
    """
    Extract files from a value.

    Args:
        value: Value to extract files from, typically operation variables
        is_extractable: Matches extractable files, typically is_extractable_file
        path: Prefix for the object paths of extracted files

    Returns:
        Extraction with the clone and the files mapped to their paths

    Raises:
        ArgumentError: If value is omitted, is_extractable is not callable,
                       or path is not a string
    """
    if value is _MISSING:
        raise ArgumentError("Argument 1 `value` is required.")

    if not callable(is_extractable):
        raise ArgumentError("Argument 2 `is_extractable` must be a function.")

    if not isinstance(path, str):
        raise ArgumentError("Argument 3 `path` must be a string.")

    # id(container) -> (container, clone); the container is kept to pin its id
    clones: Dict[int, Tuple[Any, Clone]] = {}
    files: FileIdentityMap = FileIdentityMap()

    def recurse(value: Any, path: ObjectPath, recursed: FrozenSet[int]) -> Any:
        if is_extractable(value):
            files.add(value, path)
            return None

        value_is_list = isinstance(value, (list, tuple, FileList))
        if not value_is_list and not isinstance(value, dict):
            return value

        key = id(value)
        cached = clones.get(key)
        uncloned = cached is None

        if uncloned:
            clone: Clone = [] if value_is_list else {}
            clones[key] = (value, clone)
        else:
            clone = cached[1]

        if key in recursed:
            return clone

        path_prefix = f"{path}." if path else ""
        recursed_deeper = recursed | {key}

        if value_is_list:
            for index, item in enumerate(value):
                item_clone = recurse(item, f"{path_prefix}{index}", recursed_deeper)
                if uncloned:
                    clone.append(item_clone)
        else:
            for item_key, item in value.items():
                item_clone = recurse(item, f"{path_prefix}{item_key}", recursed_deeper)
                if uncloned:
                    clone[item_key] = item_clone

        return clone

    clone = recurse(value, path, frozenset())

    logger.debug(
        f"Extracted {len(files)} file(s) at {sum(len(p) for p in files.values())} path(s)"
    )
    return Extraction(clone=clone, files=files)


__all__ = ["extract_files"]
