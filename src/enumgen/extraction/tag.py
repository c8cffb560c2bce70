"""Tag strategy: enums declared by a marker field on a carrier class.

A carrier class holds a field annotated with the ``EnumTag`` marker whose
string value carries a ``values:"..."`` payload::

    class Priority:
        enum: EnumTag = 'values:"low,medium,high"'

Every token is title-cased, and the title-cased token serves as both the
constant name and the string value ("Low" = "Low").
"""

from typing import List, Optional, Sequence

from enumgen.extraction.base import Extractor, build_enum_def
from enumgen.extraction.models import EnumDef, EnumValue
from enumgen.global_models import ExtractionStrategy
from enumgen.scanning.models import ClassDeclNode, FieldDecl, SourceFile
from enumgen.utils.casing import to_title_case

MARKER_TYPE = "EnumTag"
VALUES_PREFIX = 'values:"'


def is_marker_field(field: FieldDecl) -> bool:
    """Return True if the field is annotated with the EnumTag marker."""
    if field.type_name is None:
        return False
    return field.type_name.rsplit(".", 1)[-1] == MARKER_TYPE


def parse_enum_tag(tag: str) -> Optional[List[str]]:
    """
    Extract title-cased values from a tag string.

    Args:
        tag: Tag text such as 'values:"low,medium,high"'

    Returns:
        Title-cased tokens, or None if the tag has no usable payload
    """
    start = tag.find(VALUES_PREFIX)
    if start < 0:
        return None

    payload = tag[start + len(VALUES_PREFIX) :]
    end = payload.find('"')
    if end < 0:
        return None

    values = [to_title_case(token) for token in payload[:end].split(",") if token]
    return values or None


class TagExtractor(Extractor):
    """Extract enums from classes carrying an EnumTag marker field."""

    @property
    def name(self) -> str:
        """Return the strategy name."""
        return ExtractionStrategy.TAG.value

    def extract(self, files: Sequence[SourceFile]) -> List[EnumDef]:
        enums: List[EnumDef] = []
        for source_file in files:
            for class_decl in source_file.iter_nodes(ClassDeclNode):
                values = self._class_values(class_decl)
                if not values:
                    continue
                enums.append(
                    build_enum_def(
                        class_decl.name,
                        [
                            EnumValue(constant_name=value, string_value=value)
                            for value in values
                        ],
                        location=f"{source_file.path}:{class_decl.line}",
                    )
                )
        return enums

    @staticmethod
    def _class_values(class_decl: ClassDeclNode) -> Optional[List[str]]:
        # The last marker with a usable payload wins
        values = None
        for field in class_decl.attributes:
            if not is_marker_field(field) or field.tag is None:
                continue
            parsed = parse_enum_tag(field.tag)
            if parsed:
                values = parsed
        return values
