"""Pydantic models for scanned source files.

Scanned files are reduced to a closed set of node kinds so that extractors
never touch the Python ``ast`` module directly.
"""

from typing import Annotated, Iterator, List, Literal, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field


class CommentNode(BaseModel):
    """A single ``#`` comment, including the leading hash."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["comment"] = "comment"
    line: int = Field(..., description="1-based line number")
    text: str = Field(..., description="Raw comment text, e.g. '# enum:name=X'")


class TypeDeclNode(BaseModel):
    """A non-class type declaration (NewType, TypeAlias or ``type`` statement)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["type_decl"] = "type_decl"
    line: int
    name: str


class FieldDecl(BaseModel):
    """An annotated attribute declared in a class body."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_name: Optional[str] = Field(
        None, description="Dotted annotation name, None if not a simple name"
    )
    tag: Optional[str] = Field(
        None, description="String literal assigned to the field, if any"
    )


class ClassDeclNode(BaseModel):
    """A class declaration and its annotated fields."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["class_decl"] = "class_decl"
    line: int
    name: str
    attributes: List[FieldDecl] = Field(default_factory=list)


class ConstMember(BaseModel):
    """One name bound inside a constant block."""

    model_config = ConfigDict(frozen=True)

    line: int
    name: str
    type_name: Optional[str] = Field(
        None, description="Declared type, None for untyped assignments"
    )


class ConstBlockNode(BaseModel):
    """A run of consecutive module-level assignments."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["const_block"] = "const_block"
    line: int
    members: List[ConstMember] = Field(default_factory=list)


SourceNode = Annotated[
    Union[CommentNode, TypeDeclNode, ClassDeclNode, ConstBlockNode],
    Field(discriminator="kind"),
]

NodeT = TypeVar("NodeT", CommentNode, TypeDeclNode, ClassDeclNode, ConstBlockNode)


class SourceFile(BaseModel):
    """The scanned form of one source file, nodes ordered by line."""

    model_config = ConfigDict(frozen=True)

    path: str
    package: str
    nodes: List[SourceNode] = Field(default_factory=list)

    def iter_nodes(self, node_type: Type[NodeT]) -> Iterator[NodeT]:
        """Yield the nodes of one kind in source order."""
        for node in self.nodes:
            if isinstance(node, node_type):
                yield node

    def declared_type_names(self) -> List[str]:
        """Return the names of all classes and type declarations in the file."""
        return [
            node.name
            for node in self.nodes
            if isinstance(node, (ClassDeclNode, TypeDeclNode))
        ]


class ScanResult(BaseModel):
    """Files produced by one scan, plus the package they belong to."""

    model_config = ConfigDict(frozen=True)

    directory: str
    files: List[SourceFile] = Field(default_factory=list)
    package: str = Field(
        "", description="Package of the last file scanned (last writer wins)"
    )
    packages: List[str] = Field(
        default_factory=list,
        description="Distinct package names in the order first seen",
    )

    @property
    def has_package_conflict(self) -> bool:
        """True when the scanned files disagree on their package name."""
        return len(self.packages) > 1
