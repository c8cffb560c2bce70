"""Render EnumDef records into Python enum modules using Jinja2."""

import ast
from typing import Set

from jinja2 import Environment, StrictUndefined, TemplateError, UndefinedError

from enumgen.extraction.models import EnumDef
from enumgen.synthesis.templates import ENUM_TEMPLATE
from enumgen.utils.casing import to_snake_case

GENERATED_SUFFIX = "_enum_generated.py"


class SynthesisError(Exception):
    """Exception raised when an enum module cannot be rendered."""

    pass


def output_filename(enum_name: str) -> str:
    """Return the generated module's file name, e.g. "status_enum_generated.py"."""
    return f"{enum_name.lower()}{GENERATED_SUFFIX}"


# Module-level names every generated module imports
_IMPORTED_NAMES = {"json", "Enum", "Any", "List", "Union"}


def generated_names(enum_def: EnumDef) -> Set[str]:
    """Return the module-level names a module defines besides its value constants."""
    snake = to_snake_case(enum_def.name)
    return _IMPORTED_NAMES | {
        f"{enum_def.name}Enum",
        f"ALL_{to_snake_case(enum_def.plural_name).upper()}",
        f"is_valid_{snake}",
        f"parse_{snake}",
        f"{snake}_to_json",
        f"{snake}_from_json",
    }


class EnumSynthesizer:
    """Render enum definitions through a fixed Jinja2 template.

    Rendering is deterministic: the same EnumDef and package always produce
    byte-identical text. Every rendered module is parsed before it is
    returned, so invalid Python is never handed to the caller.

    Example:
        >>> synthesizer = EnumSynthesizer()
        >>> source = synthesizer.render(enum_def, package="models")
    """

    def __init__(self, template: str = ENUM_TEMPLATE):
        """
        Initialize the synthesizer.

        Args:
            template: Jinja2 template source. Defaults to the built-in
                     enum module template.

        Raises:
            SynthesisError: If the template has syntax errors
        """
        self._env = Environment(
            loader=None,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            # Generated code is Python, not HTML
            autoescape=False,
            undefined=StrictUndefined,
        )
        self._env.filters["pystr"] = repr
        self._env.filters["snake"] = to_snake_case

        try:
            self._template = self._env.from_string(template)
        except TemplateError as e:
            raise SynthesisError(f"Invalid enum template: {e}") from e

    def render(self, enum_def: EnumDef, package: str) -> str:
        """
        Render one enum module.

        Args:
            enum_def: The enum definition to render
            package: Package name the module belongs to

        Returns:
            The generated Python source

        Raises:
            SynthesisError: If a value constant collides with another
                           generated name, the template fails, or the output
                           is not valid Python (e.g. a value named "none"
                           produces the constant ``None``)
        """
        reserved = generated_names(enum_def)
        for value in enum_def.values:
            constant = f"{enum_def.name}{value.constant_name}"
            if constant in reserved:
                raise SynthesisError(
                    f"Constant {constant} of enum {enum_def.name} collides with "
                    "a generated name; rename the value"
                )

        try:
            source = self._template.render(
                package=package,
                type_name=enum_def.name,
                plural=enum_def.plural_name,
                values=enum_def.values,
            )
        except UndefinedError as e:
            raise SynthesisError(f"Undefined variable in enum template: {e}") from e
        except TemplateError as e:
            raise SynthesisError(f"Template error: {e}") from e

        try:
            ast.parse(source, filename=output_filename(enum_def.name))
        except SyntaxError as e:
            raise SynthesisError(
                f"Generated code for enum {enum_def.name} is not valid Python: {e}"
            ) from e

        return source
