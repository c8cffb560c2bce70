"""Source scanner that reduces Python files to enumgen syntax nodes."""

import ast
import io
import tokenize
from pathlib import Path
from typing import List, Optional

from enumgen.scanning.models import (
    ClassDeclNode,
    CommentNode,
    ConstBlockNode,
    ConstMember,
    FieldDecl,
    ScanResult,
    SourceFile,
    TypeDeclNode,
)
from enumgen.utils.file_utils import is_generated_source, read_source_file

_TYPE_ALIAS_NAMES = {"TypeAlias", "typing.TypeAlias", "typing_extensions.TypeAlias"}
_NEWTYPE_NAMES = {"NewType", "typing.NewType", "typing_extensions.NewType"}
_FINAL_NAMES = {"Final", "typing.Final", "typing_extensions.Final"}


class ScanError(Exception):
    """Exception raised when a directory or source file cannot be scanned."""

    pass


def package_name_for(directory: Path) -> str:
    """Return the package name for files living in a directory.

    A directory holding ``__init__.py`` yields its dotted package path,
    climbing through parents that are packages too. Any other directory
    yields its own name.

    Args:
        directory: Directory containing the source file.

    Returns:
        The package name, e.g. "app.models".
    """
    directory = directory.resolve()
    if not (directory / "__init__.py").is_file():
        return directory.name

    parts: List[str] = []
    current = directory
    while (current / "__init__.py").is_file():
        parts.append(current.name)
        if current.parent == current:
            break
        current = current.parent
    return ".".join(reversed(parts))


def _dotted_name(expr: ast.expr) -> Optional[str]:
    """Return "a.b.c" for Name/Attribute chains, None for anything else."""
    if isinstance(expr, ast.Name):
        return expr.id
    if isinstance(expr, ast.Attribute):
        base = _dotted_name(expr.value)
        return f"{base}.{expr.attr}" if base else None
    return None


def _annotation_name(annotation: ast.expr) -> Optional[str]:
    """Resolve an annotation to the type name it declares.

    ``Final[Status]`` resolves to "Status" and a bare ``Final`` to None.
    String annotations are taken literally.
    """
    if isinstance(annotation, ast.Constant) and isinstance(annotation.value, str):
        return annotation.value.strip() or None
    if isinstance(annotation, ast.Subscript):
        if _dotted_name(annotation.value) in _FINAL_NAMES:
            return _annotation_name(annotation.slice)
        return None
    name = _dotted_name(annotation)
    if name in _FINAL_NAMES:
        return None
    return name


def _const_members(stmt: ast.stmt) -> Optional[List[ConstMember]]:
    """Return the members a statement adds to a constant block.

    None means the statement is not a constant assignment and closes the
    current block.
    """
    if isinstance(stmt, ast.Assign):
        if not all(isinstance(target, ast.Name) for target in stmt.targets):
            return None
        return [
            ConstMember(line=stmt.lineno, name=target.id)
            for target in stmt.targets
        ]
    if isinstance(stmt, ast.AnnAssign):
        if not isinstance(stmt.target, ast.Name) or stmt.value is None:
            return None
        return [
            ConstMember(
                line=stmt.lineno,
                name=stmt.target.id,
                type_name=_annotation_name(stmt.annotation),
            )
        ]
    return None


def _type_decl(stmt: ast.stmt) -> Optional[TypeDeclNode]:
    """Recognize NewType, TypeAlias and ``type X = ...`` declarations."""
    type_alias_stmt = getattr(ast, "TypeAlias", None)
    if type_alias_stmt is not None and isinstance(stmt, type_alias_stmt):
        return TypeDeclNode(line=stmt.lineno, name=stmt.name.id)

    if isinstance(stmt, ast.AnnAssign) and isinstance(stmt.target, ast.Name):
        if _dotted_name(stmt.annotation) in _TYPE_ALIAS_NAMES:
            return TypeDeclNode(line=stmt.lineno, name=stmt.target.id)
        return None

    if (
        isinstance(stmt, ast.Assign)
        and len(stmt.targets) == 1
        and isinstance(stmt.targets[0], ast.Name)
        and isinstance(stmt.value, ast.Call)
        and _dotted_name(stmt.value.func) in _NEWTYPE_NAMES
    ):
        return TypeDeclNode(line=stmt.lineno, name=stmt.targets[0].id)

    return None


class _DeclarationCollector(ast.NodeVisitor):
    """Collects class, type and constant-block nodes from a module tree."""

    def __init__(self) -> None:
        self.nodes: List[object] = []

    def visit_Module(self, node: ast.Module) -> None:
        block: List[ConstMember] = []
        block_line = 0

        for stmt in node.body:
            type_decl = _type_decl(stmt)
            if type_decl is not None:
                self.nodes.append(type_decl)

            members = _const_members(stmt)
            if members is None:
                self._flush_block(block, block_line)
                block = []
                self.visit(stmt)
                continue

            if not block:
                block_line = stmt.lineno
            block.extend(members)

        self._flush_block(block, block_line)

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        attributes = []
        for stmt in node.body:
            if isinstance(stmt, ast.AnnAssign) and isinstance(stmt.target, ast.Name):
                tag = None
                if isinstance(stmt.value, ast.Constant) and isinstance(
                    stmt.value.value, str
                ):
                    tag = stmt.value.value
                attributes.append(
                    FieldDecl(
                        name=stmt.target.id,
                        type_name=_dotted_name(stmt.annotation),
                        tag=tag,
                    )
                )

        self.nodes.append(
            ClassDeclNode(line=node.lineno, name=node.name, attributes=attributes)
        )
        # Nested classes are declarations too
        self.generic_visit(node)

    def _flush_block(self, block: List[ConstMember], line: int) -> None:
        if block:
            self.nodes.append(ConstBlockNode(line=line, members=list(block)))


def _collect_comments(source: str) -> List[CommentNode]:
    comments = []
    for token in tokenize.generate_tokens(io.StringIO(source).readline):
        if token.type == tokenize.COMMENT:
            comments.append(CommentNode(line=token.start[0], text=token.string))
    return comments


def parse_source(source: str, path: str = "<string>", package: str = "") -> SourceFile:
    """
    Parse Python source text into a SourceFile.

    Args:
        source: The Python source code
        path: Path recorded on the result and used in error messages
        package: Package name recorded on the result

    Returns:
        SourceFile whose nodes are sorted by line number

    Raises:
        ScanError: If the source cannot be parsed or tokenized
    """
    try:
        tree = ast.parse(source, filename=path)
        comments = _collect_comments(source)
    except SyntaxError as e:
        raise ScanError(f"Failed to parse {path}: {e}") from e
    except tokenize.TokenError as e:
        raise ScanError(f"Failed to tokenize {path}: {e}") from e

    collector = _DeclarationCollector()
    collector.visit(tree)

    nodes = sorted([*comments, *collector.nodes], key=lambda node: node.line)
    return SourceFile(path=path, package=package, nodes=nodes)


class SourceScanner:
    """Scan a directory of Python files into SourceFile records."""

    def __init__(
        self,
        directory: Path,
        recursive: bool = False,
        glob_pattern: str = "*.py",
    ):
        """
        Initialize the scanner.

        Args:
            directory: Directory to scan
            recursive: Whether to descend into subdirectories
            glob_pattern: Glob pattern for source files
        """
        self.directory = directory
        self.recursive = recursive
        self.glob_pattern = glob_pattern

    def scan(self) -> ScanResult:
        """
        Scan every matching file in the directory.

        Files carrying the enumgen generated header are skipped.

        Returns:
            ScanResult with files in sorted path order

        Raises:
            ScanError: If the directory is missing or unreadable, or a file
                       cannot be read or parsed
        """
        if not self.directory.exists():
            raise ScanError(f"Directory not found: {self.directory}")

        if not self.directory.is_dir():
            raise ScanError(f"Not a directory: {self.directory}")

        if self.recursive:
            pattern = f"**/{self.glob_pattern}"
        else:
            pattern = self.glob_pattern

        try:
            next(self.directory.iterdir(), None)
            paths = sorted(
                path for path in self.directory.glob(pattern) if path.is_file()
            )
        except OSError as e:
            raise ScanError(f"Cannot read directory {self.directory}: {e}") from e

        files: List[SourceFile] = []
        packages: List[str] = []
        package = ""

        for path in paths:
            source_file = self.scan_file(path)
            if source_file is None:
                continue

            files.append(source_file)
            package = source_file.package
            if package not in packages:
                packages.append(package)

        return ScanResult(
            directory=str(self.directory),
            files=files,
            package=package,
            packages=packages,
        )

    def scan_file(self, file_path: Path) -> Optional[SourceFile]:
        """
        Scan a single file.

        Args:
            file_path: Path to the Python source file

        Returns:
            The SourceFile, or None if the file is generated output

        Raises:
            ScanError: If the file cannot be read or parsed
        """
        try:
            source = read_source_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            raise ScanError(f"Failed to read {file_path}: {e}") from e

        if is_generated_source(source):
            return None

        return parse_source(
            source,
            path=str(file_path),
            package=package_name_for(file_path.parent),
        )
