"""Const-block strategy: enums inferred from prefixed constant blocks.

Given target type names, a run of module-level constants prefixed with a
declared type becomes an enum::

    Status = NewType("Status", str)

    StatusPending: Status = "pending"
    StatusInProgress: Status = "in_progress"

The suffix after the type name is the constant name, and its snake_case form
is the string value.
"""

from typing import Iterable, List, Optional, Sequence

from enumgen.extraction.base import Extractor, build_enum_def
from enumgen.extraction.models import EnumDef, EnumValue
from enumgen.global_models import ExtractionStrategy
from enumgen.scanning.models import ConstBlockNode, ConstMember, SourceFile
from enumgen.utils.casing import to_snake_case


def parse_type_names(raw: Optional[str]) -> List[str]:
    """Split a comma-separated list of type names, trimming each entry.

    Args:
        raw: Text such as "Status, Priority". None yields an empty list.

    Returns:
        Non-empty names in their original order, without duplicates.
    """
    if not raw:
        return []
    return normalize_type_names(raw.split(","))


def normalize_type_names(names: Iterable[str]) -> List[str]:
    """Trim names, drop blanks and duplicates, keep first-seen order."""
    result: List[str] = []
    for name in names:
        name = name.strip()
        if name and name not in result:
            result.append(name)
    return result


def _type_matches(type_name: Optional[str], target: str) -> bool:
    if type_name is None:
        return False
    return type_name.rsplit(".", 1)[-1] == target


def _has_prefix(member: ConstMember, target: str) -> bool:
    if not member.name.startswith(target):
        return False
    suffix = member.name[len(target) :]
    # "Statuses" is not a Status constant
    return not (suffix and suffix[0].islower())


def select_members(block: ConstBlockNode, target: str) -> List[ConstMember]:
    """
    Pick the members of a block that belong to a target type.

    Members annotated with the target are preferred. Untyped members are
    used only when no member is annotated with it. Members annotated with
    another type never qualify.

    Args:
        block: The constant block
        target: Target type name

    Returns:
        Qualifying members in declaration order (may be empty)
    """
    prefixed = [member for member in block.members if _has_prefix(member, target)]
    typed = [member for member in prefixed if _type_matches(member.type_name, target)]
    if typed:
        return typed
    return [member for member in prefixed if member.type_name is None]


class ConstBlockExtractor(Extractor):
    """Extract enums from constant blocks prefixed with a target type name."""

    def __init__(self, type_names: Optional[Sequence[str]] = None):
        """
        Initialize the extractor.

        Args:
            type_names: Target type names. Names that are not declared in
                       the scanned files are ignored.
        """
        self.type_names = normalize_type_names(type_names or [])

    @property
    def name(self) -> str:
        """Return the strategy name."""
        return ExtractionStrategy.CONST.value

    def extract(self, files: Sequence[SourceFile]) -> List[EnumDef]:
        declared = set()
        for source_file in files:
            declared.update(source_file.declared_type_names())
        targets = [name for name in self.type_names if name in declared]

        enums: List[EnumDef] = []
        for source_file in files:
            for block in source_file.iter_nodes(ConstBlockNode):
                for target in targets:
                    enum_def = self._block_enum(block, target, source_file.path)
                    if enum_def is not None:
                        enums.append(enum_def)
        return enums

    @staticmethod
    def _block_enum(
        block: ConstBlockNode, target: str, path: str
    ) -> Optional[EnumDef]:
        values: List[EnumValue] = []
        for member in select_members(block, target):
            suffix = member.name[len(target) :]
            if not suffix:
                continue
            values.append(
                EnumValue(constant_name=suffix, string_value=to_snake_case(suffix))
            )

        if not values:
            return None
        return build_enum_def(target, values, location=f"{path}:{block.line}")
