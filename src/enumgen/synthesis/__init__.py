"""Code synthesis for enumgen.

Renders EnumDef records into Python modules through a fixed Jinja2
template, writes them to disk and optionally runs a formatter.
"""

from enumgen.synthesis.emitter import EnumEmitter
from enumgen.synthesis.synthesizer import (
    GENERATED_SUFFIX,
    EnumSynthesizer,
    SynthesisError,
    generated_names,
    output_filename,
)
from enumgen.synthesis.templates import ENUM_TEMPLATE
from enumgen.synthesis.writer import (
    DEFAULT_FORMATTER,
    FormatterError,
    WriteError,
    parse_formatter_command,
    run_formatter,
    write_enum_module,
)

__all__ = [
    "DEFAULT_FORMATTER",
    "ENUM_TEMPLATE",
    "GENERATED_SUFFIX",
    "EnumEmitter",
    "EnumSynthesizer",
    "FormatterError",
    "SynthesisError",
    "WriteError",
    "generated_names",
    "output_filename",
    "parse_formatter_command",
    "run_formatter",
    "write_enum_module",
]
