"""Pydantic models for canonical enum definitions."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

_ES_SUFFIXES = ("s", "x", "z", "ch", "sh")


class EnumValue(BaseModel):
    """One value of an enum."""

    model_config = ConfigDict(frozen=True)

    constant_name: str = Field(
        ..., description="PascalCase constant suffix (e.g., 'InProgress')"
    )
    string_value: str = Field(
        ..., description="Wire representation of the value (e.g., 'in_progress')"
    )


class EnumDef(BaseModel):
    """An enum definition, independent of how it was discovered."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Base type name (e.g., 'Status')")
    values: List[EnumValue] = Field(
        ..., min_length=1, description="Values in declaration order"
    )
    plural: Optional[str] = Field(
        None, description="Plural used for the all-values collection"
    )

    @model_validator(mode="after")
    def _check_unique_constants(self) -> "EnumDef":
        seen = set()
        for value in self.values:
            if value.constant_name in seen:
                raise ValueError(
                    f"enum {self.name} declares constant "
                    f"{value.constant_name!r} more than once"
                )
            seen.add(value.constant_name)
        return self

    @property
    def plural_name(self) -> str:
        """Return the explicit plural, or derive one from the name."""
        if self.plural:
            return self.plural
        lowered = self.name.lower()
        if lowered.endswith(_ES_SUFFIXES):
            return f"{self.name}es"
        if len(lowered) > 1 and lowered[-1] == "y" and lowered[-2] not in "aeiou":
            return f"{self.name[:-1]}ies"
        return f"{self.name}s"

    @property
    def constant_names(self) -> List[str]:
        """Return the generated identifiers, e.g. ['StatusPending', ...]."""
        return [f"{self.name}{value.constant_name}" for value in self.values]


class ExtractionReport(BaseModel):
    """Enums discovered by one scan, used by the inspect command."""

    directory: str = Field(..., description="Scanned directory")
    strategy: str = Field(..., description="Strategy that produced the enums")
    package: str = Field("", description="Package name used for generation")
    packages: List[str] = Field(
        default_factory=list, description="All package names seen while scanning"
    )
    enums: List[EnumDef] = Field(default_factory=list)
