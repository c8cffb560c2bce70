"""Annotation strategy: enums declared by ``# enum:`` directive comments.

A directive is a single comment line such as::

    # enum:name=Status values=pending,active,in_progress

``name=`` and ``values=`` may appear in either order. Each value token is
kept as the string value, and its PascalCase form becomes the constant name.
"""

from typing import List, Optional, Sequence

from enumgen.extraction.base import Extractor, MalformedDirective, build_enum_def
from enumgen.extraction.models import EnumDef, EnumValue
from enumgen.global_models import ExtractionStrategy
from enumgen.scanning.models import CommentNode, SourceFile
from enumgen.utils.casing import to_pascal_case

DIRECTIVE_PREFIX = "enum:"
DIRECTIVE_KEYS = ("name=", "values=")


def directive_body(comment: str) -> Optional[str]:
    """Return the text after ``enum:`` if the comment is a directive.

    A directive must carry a ``name=`` or ``values=`` token. Prose that merely
    starts with "enum:" is an ordinary comment.

    Args:
        comment: Raw comment text including the leading ``#``.

    Returns:
        The directive body, or None for ordinary comments.
    """
    text = comment[1:].lstrip() if comment.startswith("#") else comment
    if not text.startswith(DIRECTIVE_PREFIX):
        return None
    body = text[len(DIRECTIVE_PREFIX) :].rstrip()
    if not any(part.startswith(DIRECTIVE_KEYS) for part in body.split(" ")):
        return None
    return body


def parse_enum_directive(body: str, location: str = "") -> EnumDef:
    """
    Parse the body of an enum directive.

    Args:
        body: Directive text after the ``enum:`` prefix
        location: "path:line" prefix used in error messages

    Returns:
        EnumDef with one value per comma-separated token

    Raises:
        MalformedDirective: If name or values are missing or empty
        DuplicateEnumValue: If two tokens map to the same constant name
    """
    prefix = f"{location}: " if location else ""
    name = ""
    values_str = ""

    for part in body.split(" "):
        if part.startswith("name="):
            name = part[len("name=") :]
        elif part.startswith("values="):
            values_str = part[len("values=") :]

    if not name:
        raise MalformedDirective(f"{prefix}enum name not specified")
    if not values_str:
        raise MalformedDirective(f"{prefix}enum values not specified")

    tokens = values_str.split(",")
    if any(not token for token in tokens):
        raise MalformedDirective(f"{prefix}enum {name} has an empty value")

    values = [
        EnumValue(constant_name=to_pascal_case(token), string_value=token)
        for token in tokens
    ]
    return build_enum_def(name, values, location=location)


class AnnotationExtractor(Extractor):
    """Extract enums from ``# enum:`` directive comments."""

    @property
    def name(self) -> str:
        """Return the strategy name."""
        return ExtractionStrategy.ANNOTATION.value

    def extract(self, files: Sequence[SourceFile]) -> List[EnumDef]:
        """Extract one EnumDef per directive, in file and line order.

        Raises:
            MalformedDirective: On the first directive missing a key or value
        """
        enums: List[EnumDef] = []
        for source_file in files:
            for comment in source_file.iter_nodes(CommentNode):
                body = directive_body(comment.text)
                if body is None:
                    continue
                location = f"{source_file.path}:{comment.line}"
                enums.append(parse_enum_directive(body, location=location))
        return enums
