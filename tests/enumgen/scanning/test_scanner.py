"""Tests for the source scanner."""

import os

import pytest

from enumgen.scanning import (
    ClassDeclNode,
    CommentNode,
    ConstBlockNode,
    ScanError,
    SourceScanner,
    TypeDeclNode,
    package_name_for,
    parse_source,
)
from enumgen.utils.file_utils import GENERATED_HEADER


class TestParseSourceComments:
    """Tests for comment collection."""

    def test_collects_comments_with_lines(self):
        source = "# first\nx = 1  # trailing\n\n# enum:name=Status values=a,b\n"
        source_file = parse_source(source)

        comments = list(source_file.iter_nodes(CommentNode))
        assert [(c.line, c.text) for c in comments] == [
            (1, "# first"),
            (2, "# trailing"),
            (4, "# enum:name=Status values=a,b"),
        ]

    def test_hash_inside_string_is_not_a_comment(self):
        source_file = parse_source('TEXT = "# enum:name=X values=a"\n')

        assert list(source_file.iter_nodes(CommentNode)) == []


class TestParseSourceClasses:
    """Tests for class declaration collection."""

    def test_class_fields_and_tags(self):
        source = '''
class Priority:
    enum: EnumTag = 'values:"low,high"'
    label: str
    count = 3
'''
        source_file = parse_source(source)
        classes = list(source_file.iter_nodes(ClassDeclNode))

        assert len(classes) == 1
        priority = classes[0]
        assert priority.name == "Priority"
        assert [f.name for f in priority.attributes] == ["enum", "label"]
        assert priority.attributes[0].type_name == "EnumTag"
        assert priority.attributes[0].tag == 'values:"low,high"'
        assert priority.attributes[1].type_name == "str"
        assert priority.attributes[1].tag is None

    def test_dotted_annotation(self):
        source = "class Role:\n    enum: enumgen.EnumTag = 'values:\"admin\"'\n"
        field = list(parse_source(source).iter_nodes(ClassDeclNode))[0].attributes[0]

        assert field.type_name == "enumgen.EnumTag"

    def test_nested_classes_are_collected(self):
        source = """
class Outer:
    class Inner:
        kind: str = "x"

def build():
    class Local:
        pass
"""
        names = [c.name for c in parse_source(source).iter_nodes(ClassDeclNode)]

        assert names == ["Outer", "Inner", "Local"]


class TestParseSourceTypeDecls:
    """Tests for non-class type declarations."""

    def test_newtype_and_type_alias(self):
        source = """
from typing import NewType, TypeAlias
import typing

Status = NewType("Status", str)
Priority: TypeAlias = str
Level = typing.NewType("Level", str)
NotAType = int("3")
"""
        names = [t.name for t in parse_source(source).iter_nodes(TypeDeclNode)]

        assert names == ["Status", "Priority", "Level"]

    def test_declared_type_names_include_classes(self):
        source = 'class Role(str):\n    pass\n\nStatus = NewType("Status", str)\n'

        assert sorted(parse_source(source).declared_type_names()) == ["Role", "Status"]


class TestParseSourceConstBlocks:
    """Tests for constant block collection."""

    def test_consecutive_assignments_form_one_block(self):
        source = """
StatusPending: Status = "pending"
StatusActive: Status = "active"
StatusDone = "done"
"""
        blocks = list(parse_source(source).iter_nodes(ConstBlockNode))

        assert len(blocks) == 1
        members = blocks[0].members
        assert [m.name for m in members] == [
            "StatusPending",
            "StatusActive",
            "StatusDone",
        ]
        assert [m.type_name for m in members] == ["Status", "Status", None]
        assert blocks[0].line == 2

    def test_other_statements_split_blocks(self):
        source = """
A = 1
B = 2

def helper():
    C = 3

D = 4
"""
        blocks = list(parse_source(source).iter_nodes(ConstBlockNode))

        assert [[m.name for m in b.members] for b in blocks] == [["A", "B"], ["D"]]

    def test_final_annotations(self):
        source = """
from typing import Final

StatusPending: Final[Status] = "pending"
StatusActive: Final = "active"
"""
        block = list(parse_source(source).iter_nodes(ConstBlockNode))[0]

        assert [m.type_name for m in block.members] == ["Status", None]

    def test_string_annotation(self):
        block = list(
            parse_source('StatusPending: "Status" = "pending"\n').iter_nodes(
                ConstBlockNode
            )
        )[0]

        assert block.members[0].type_name == "Status"

    def test_function_level_assignments_are_ignored(self):
        source = "def f():\n    StatusPending = 'pending'\n"

        assert list(parse_source(source).iter_nodes(ConstBlockNode)) == []

    def test_nodes_are_sorted_by_line(self):
        source = "# top\nA = 1\nclass X:\n    pass\n# bottom\n"
        lines = [node.line for node in parse_source(source).nodes]

        assert lines == sorted(lines)


class TestParseSourceErrors:
    """Tests for parse failures."""

    def test_syntax_error_raises_scan_error(self):
        with pytest.raises(ScanError) as exc_info:
            parse_source("def broken(:\n", path="broken.py")

        assert "broken.py" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, SyntaxError)


class TestPackageNameFor:
    """Tests for package name resolution."""

    def test_plain_directory_uses_its_name(self, tmp_path):
        directory = tmp_path / "models"
        directory.mkdir()

        assert package_name_for(directory) == "models"

    def test_nested_packages_are_dotted(self, tmp_path):
        inner = tmp_path / "app" / "models"
        inner.mkdir(parents=True)
        (tmp_path / "app" / "__init__.py").write_text("")
        (inner / "__init__.py").write_text("")

        assert package_name_for(inner) == "app.models"

    def test_stops_at_first_non_package_parent(self, tmp_path):
        inner = tmp_path / "src" / "models"
        inner.mkdir(parents=True)
        (inner / "__init__.py").write_text("")

        assert package_name_for(inner) == "models"


class TestSourceScanner:
    """Tests for SourceScanner."""

    def test_scan_directory(self, tmp_path):
        (tmp_path / "b.py").write_text("# enum:name=B values=x\n")
        (tmp_path / "a.py").write_text("# enum:name=A values=y\n")
        (tmp_path / "notes.txt").write_text("# enum:name=C values=z\n")

        result = SourceScanner(tmp_path).scan()

        assert [os.path.basename(f.path) for f in result.files] == ["a.py", "b.py"]
        assert result.package == tmp_path.name
        assert result.packages == [tmp_path.name]
        assert not result.has_package_conflict

    def test_empty_directory(self, tmp_path):
        result = SourceScanner(tmp_path).scan()

        assert result.files == []
        assert result.package == ""
        assert result.packages == []

    def test_non_recursive_ignores_subdirectories(self, tmp_path):
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "inner.py").write_text("A = 1\n")

        assert SourceScanner(tmp_path).scan().files == []

    def test_generated_files_are_skipped(self, tmp_path):
        (tmp_path / "status_enum_generated.py").write_text(
            f"{GENERATED_HEADER}\nStatusPending = 1\n"
        )
        (tmp_path / "models.py").write_text("A = 1\n")

        result = SourceScanner(tmp_path).scan()

        assert [os.path.basename(f.path) for f in result.files] == ["models.py"]

    def test_byte_order_mark_is_accepted(self, tmp_path):
        (tmp_path / "models.py").write_bytes(
            b"\xef\xbb\xbf# enum:name=Status values=a,b\n"
        )

        result = SourceScanner(tmp_path).scan()

        comments = list(result.files[0].iter_nodes(CommentNode))
        assert [(c.line, c.text) for c in comments] == [
            (1, "# enum:name=Status values=a,b")
        ]

    def test_generated_file_with_byte_order_mark_is_skipped(self, tmp_path):
        (tmp_path / "status_enum_generated.py").write_bytes(
            b"\xef\xbb\xbf" + f"{GENERATED_HEADER}\nX = 1\n".encode("utf-8")
        )

        assert SourceScanner(tmp_path).scan().files == []

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ScanError) as exc_info:
            SourceScanner(tmp_path / "nope").scan()

        assert "Directory not found" in str(exc_info.value)

    def test_path_is_a_file(self, tmp_path):
        source = tmp_path / "models.py"
        source.write_text("A = 1\n")

        with pytest.raises(ScanError) as exc_info:
            SourceScanner(source).scan()

        assert "Not a directory" in str(exc_info.value)

    def test_unparseable_file(self, tmp_path):
        (tmp_path / "broken.py").write_text("class (:\n")

        with pytest.raises(ScanError) as exc_info:
            SourceScanner(tmp_path).scan()

        assert "broken.py" in str(exc_info.value)

    def test_undecodable_file(self, tmp_path):
        (tmp_path / "latin1.py").write_bytes(b"NAME = '\xff'\n")

        with pytest.raises(ScanError) as exc_info:
            SourceScanner(tmp_path).scan()

        assert "Failed to read" in str(exc_info.value)


class TestPackageConflicts:
    """Files disagreeing on their package: last writer wins.

    This documents current behavior; callers should check
    has_package_conflict rather than rely on which name is kept.
    """

    def test_recursive_scan_reports_conflict(self, tmp_path):
        first = tmp_path / "alpha"
        second = tmp_path / "beta"
        for directory in (first, second):
            directory.mkdir()
            (directory / "__init__.py").write_text("")
        (first / "models.py").write_text("# enum:name=A values=x\n")
        (second / "models.py").write_text("# enum:name=B values=y\n")

        result = SourceScanner(tmp_path, recursive=True).scan()

        assert result.has_package_conflict
        assert result.packages == ["alpha", "beta"]
        assert result.package == "beta"
