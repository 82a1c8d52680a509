"""
Unit tests for upload domain models.

Test Categories:
1. Blob / File value objects
2. FileList collection
3. FileIdentityMap
4. GraphQLOperation
"""

from datetime import datetime

import pytest

from gql_upload.domain.models import (
    ArgumentError,
    Blob,
    File,
    FileIdentityMap,
    FileList,
    GraphQLOperation,
)


# ═══════════════════════════════════════════════════════════════════════════════
# Blob / File
# ═══════════════════════════════════════════════════════════════════════════════


class TestBlob:
    """Tests for Blob value object."""

    def test_create_blob(self):
        blob = Blob(b"hello", content_type="text/plain")

        assert blob.content == b"hello"
        assert blob.size == 5
        assert blob.content_type == "text/plain"

    def test_str_content_encoded(self):
        assert Blob("héllo").content == "héllo".encode("utf-8")

    def test_bytearray_content_copied(self):
        source = bytearray(b"abc")
        blob = Blob(source)
        source[0] = ord("z")

        assert blob.content == b"abc"

    def test_invalid_content(self):
        with pytest.raises(ArgumentError):
            Blob(123)

    def test_from_parts(self):
        blob = Blob.from_parts([b"a", "b", bytearray(b"c")], content_type="text/plain")

        assert blob.content == b"abc"

    def test_effective_content_type(self):
        assert Blob(b"").effective_content_type == "application/octet-stream"
        assert Blob(b"", content_type="image/png").effective_content_type == "image/png"

    def test_blob_immutable(self):
        blob = Blob(b"x")

        with pytest.raises(AttributeError):
            blob.content = b"y"

    def test_blobs_compare_by_identity(self):
        first = Blob(b"x")
        second = Blob(b"x")

        assert first != second
        assert first == first
        assert len({first, second}) == 2


class TestFile:
    """Tests for File value object."""

    def test_create_file(self):
        file = File(b"data", name="data.csv", content_type="text/csv")

        assert file.name == "data.csv"
        assert file.size == 4
        assert isinstance(file, Blob)

    def test_name_required(self):
        with pytest.raises(ArgumentError):
            File(b"data", name="")

    def test_from_path(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        file = File.from_path(path)

        assert file.name == "notes.txt"
        assert file.content == b"hello"
        assert file.content_type == "text/plain"
        assert isinstance(file.last_modified, datetime)

    def test_from_path_unknown_extension(self, tmp_path):
        path = tmp_path / "data.unknownext"
        path.write_bytes(b"\x00")

        file = File.from_path(path)

        assert file.content_type == ""
        assert file.effective_content_type == "application/octet-stream"


# ═══════════════════════════════════════════════════════════════════════════════
# FileList
# ═══════════════════════════════════════════════════════════════════════════════


class TestFileList:
    """Tests for FileList collection."""

    def test_sequence_behaviour(self, file1, file2):
        files = FileList([file1, file2])

        assert len(files) == 2
        assert files[0] is file1
        assert list(files) == [file1, file2]
        assert file2 in files

    def test_item(self, file1):
        files = FileList([file1])

        assert files.item(0) is file1
        assert files.item(1) is None
        assert files.item(-1) is None

    def test_slice_returns_file_list(self, file1, file2):
        files = FileList([file1, file2])

        assert isinstance(files[1:], FileList)
        assert list(files[1:]) == [file2]

    def test_rejects_non_files(self):
        with pytest.raises(ArgumentError):
            FileList(["not a file"])


# ═══════════════════════════════════════════════════════════════════════════════
# FileIdentityMap
# ═══════════════════════════════════════════════════════════════════════════════


class TestFileIdentityMap:
    """Tests for the identity-keyed path map."""

    def test_add_and_get(self, file1):
        files = FileIdentityMap()
        files.add(file1, "a")
        files.add(file1, "b")

        assert files[file1] == ["a", "b"]
        assert len(files) == 1

    def test_insertion_order(self, file1, file2):
        files = FileIdentityMap()
        files.add(file2, "x")
        files.add(file1, "y")
        files.add(file2, "z")

        assert files.keys() == [file2, file1]
        assert files.values() == [["x", "z"], ["y"]]
        assert files.items() == [(file2, ["x", "z"]), (file1, ["y"])]

    def test_equal_values_are_distinct_keys(self):
        first = [1]
        second = [1]
        files = FileIdentityMap()
        files.add(first, "a")
        files.add(second, "b")

        assert len(files) == 2
        assert files[first] == ["a"]
        assert files[second] == ["b"]

    def test_empty_map_is_falsy(self):
        assert not FileIdentityMap()


# ═══════════════════════════════════════════════════════════════════════════════
# GraphQLOperation
# ═══════════════════════════════════════════════════════════════════════════════


class TestGraphQLOperation:
    """Tests for GraphQLOperation."""

    def test_defaults(self):
        operation = GraphQLOperation(query="{ ok }")

        assert operation.variables == {}
        assert operation.operation_name is None
        assert operation.get_context() == {}

    def test_set_context_merges(self):
        operation = GraphQLOperation(query="{ ok }", context={"uri": "/a"})
        operation.set_context(headers={"x": "1"})

        assert operation.get_context() == {"uri": "/a", "headers": {"x": "1"}}
