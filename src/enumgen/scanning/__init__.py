"""Source scanning for enumgen.

Python files are parsed into a closed set of syntax nodes (comments, type
declarations, class declarations and constant blocks) that the extraction
strategies consume.
"""

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
from enumgen.scanning.scanner import (
    ScanError,
    SourceScanner,
    package_name_for,
    parse_source,
)

__all__ = [
    # Models
    "ClassDeclNode",
    "CommentNode",
    "ConstBlockNode",
    "ConstMember",
    "FieldDecl",
    "ScanResult",
    "SourceFile",
    "TypeDeclNode",
    # Scanner
    "ScanError",
    "SourceScanner",
    "package_name_for",
    "parse_source",
]
