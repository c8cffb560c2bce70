"""CLI entry point for enumgen."""

from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console

from enumgen.extraction import (
    EnumDef,
    ExtractionError,
    ExtractionReport,
    ExtractorError,
    get_extractor,
    list_extractors,
    load_enum_config,
)
from enumgen.extraction.const_block import normalize_type_names, parse_type_names
from enumgen.extraction.formatters import (
    OutputWriter,
    ReportJsonFormatter,
    ReportTextFormatter,
)
from enumgen.global_models import ExtractionStrategy, OutputFormat
from enumgen.scanning import ScanError, ScanResult, SourceScanner
from enumgen.synthesis import (
    DEFAULT_FORMATTER,
    EnumEmitter,
    EnumSynthesizer,
    FormatterError,
    SynthesisError,
    WriteError,
    output_filename,
    parse_formatter_command,
)
from enumgen.utils.config import ConfigSettings, load_config

app = typer.Typer(
    name="enumgen",
    help="Generate string-backed Python enum modules from declarations in source files.",
    invoke_without_command=False,
)
console = Console()
err_console = Console(stderr=True)


def _resolve_type_names(types: Optional[str], config: ConfigSettings) -> List[str]:
    """CLI --types wins over the config file's list."""
    if types:
        return parse_type_names(types)
    return normalize_type_names(config.types or [])


def _resolve_formatter(
    formatter: Optional[str], no_format: bool, config: ConfigSettings
) -> List[str]:
    """Return the formatter command, or an empty list when formatting is off."""
    if no_format or config.format_output is False:
        return []
    return parse_formatter_command(formatter or config.formatter or DEFAULT_FORMATTER)


def _extract(
    directory: Path,
    strategy: str,
    type_names: List[str],
    recursive: bool,
) -> Tuple[ScanResult, List[EnumDef]]:
    """Scan a directory and run the selected strategy over it.

    Raises:
        ScanError: If the directory cannot be scanned.
        ExtractorError: If the strategy is unknown.
        ExtractionError: If a declaration is malformed.
    """
    scan = SourceScanner(directory, recursive=recursive).scan()

    if scan.has_package_conflict:
        err_console.print(
            f"[yellow]Warning:[/yellow] Files disagree on their package "
            f"({', '.join(scan.packages)}); using '{scan.package}'"
        )

    options = {}
    if strategy == ExtractionStrategy.CONST.value:
        options["type_names"] = type_names

    extractor = get_extractor(strategy, **options)
    return scan, extractor.extract(scan.files)


def _check_const_types(strategy: str, type_names: List[str]) -> None:
    if strategy == ExtractionStrategy.CONST.value and not type_names:
        err_console.print(
            "[red]Error:[/red] The 'const' strategy requires --types "
            "(e.g. --types 'Status, Priority')."
        )
        raise typer.Exit(1)


def _report_formatted(emitter: EnumEmitter, formatter_command: List[str]) -> None:
    if emitter.formatted_files:
        console.print(
            f"[dim]Formatted {len(emitter.formatted_files)} file(s) with "
            f"'{' '.join(formatter_command)}'[/dim]"
        )


@app.callback()
def main():
    """enumgen - enum code generator."""
    pass


@app.command()
def generate(
    directory: Path = typer.Argument(
        Path("."),
        help="Directory to scan for enum definitions",
    ),
    strategy: Optional[str] = typer.Option(
        None,
        "--strategy",
        "-s",
        help="Extraction strategy: 'annotation', 'tag' or 'const' "
        "(default: annotation, or from config)",
    ),
    types: Optional[str] = typer.Option(
        None,
        "--types",
        "-t",
        help="Comma-separated type names for the 'const' strategy",
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive",
        "-r",
        help="Recursively scan subdirectories",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for generated modules (default: the scanned directory)",
    ),
    formatter: Optional[str] = typer.Option(
        None,
        "--formatter",
        "-f",
        help=f"Formatter command run on each generated file (default: '{DEFAULT_FORMATTER}')",
    ),
    no_format: bool = typer.Option(
        False,
        "--no-format",
        help="Skip the formatter step",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Render and validate modules without writing them",
    ),
) -> None:
    """
    Generate enum modules from declarations in a directory.

    Configuration can be set in enumgen.toml in the current directory.
    CLI arguments override configuration file values.

    Examples:

        # Directive comments: # enum:name=Status values=pending,active
        enumgen generate ./models

        # Classes with an EnumTag marker field
        enumgen generate ./models --strategy tag

        # Prefixed constant blocks for declared types
        enumgen generate ./models --strategy const --types "Status, Priority"

        # Write somewhere else and skip formatting
        enumgen generate ./models -o ./generated --no-format
    """
    config = load_config()

    strategy = strategy or config.strategy or ExtractionStrategy.ANNOTATION.value
    recursive = recursive or bool(config.recursive)
    type_names = _resolve_type_names(types, config)
    formatter_command = _resolve_formatter(formatter, no_format, config)
    _check_const_types(strategy, type_names)

    if output_dir is None:
        output_dir = Path(config.output_dir) if config.output_dir else directory

    try:
        scan, enums = _extract(directory, strategy, type_names, recursive)

        if not enums:
            err_console.print(
                f"[yellow]Warning:[/yellow] No enum definitions found in {directory}"
            )
            return

        if dry_run:
            synthesizer = EnumSynthesizer()
            for enum_def in enums:
                synthesizer.render(enum_def, scan.package)
                console.print(f"Would write {output_dir / output_filename(enum_def.name)}")
            return

        emitter = EnumEmitter(output_dir, formatter=formatter_command)
        for path in emitter.emit_all(enums, scan.package):
            console.print(f"[green]Success:[/green] Generated {path}")
        _report_formatted(emitter, formatter_command)

    except ScanError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except ExtractorError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except ExtractionError as e:
        err_console.print(f"[red]Error:[/red] Invalid enum declaration: {e}")
        raise typer.Exit(1)

    except SynthesisError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except WriteError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except FormatterError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command("from-config")
def from_config(
    config_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Enum configuration file (JSON, YAML or TOML)",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for generated modules (default: the config file's directory)",
    ),
    formatter: Optional[str] = typer.Option(
        None,
        "--formatter",
        "-f",
        help=f"Formatter command run on each generated file (default: '{DEFAULT_FORMATTER}')",
    ),
    no_format: bool = typer.Option(
        False,
        "--no-format",
        help="Skip the formatter step",
    ),
) -> None:
    """
    Generate enum modules listed in a configuration file.

    Examples:

        enumgen from-config enums.json

        enumgen from-config enums.yaml -o ./generated
    """
    config = load_config()
    formatter_command = _resolve_formatter(formatter, no_format, config)

    if output_dir is None:
        output_dir = config_file.parent

    try:
        enum_config = load_enum_config(config_file)
        package = enum_config.package or output_dir.resolve().name
        enums = enum_config.to_enum_defs()

        emitter = EnumEmitter(output_dir, formatter=formatter_command)
        for path in emitter.emit_all(enums, package):
            console.print(f"[green]Success:[/green] Generated {path}")
        _report_formatted(emitter, formatter_command)

    except ExtractionError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except SynthesisError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except WriteError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except FormatterError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def inspect(
    directory: Path = typer.Argument(
        Path("."),
        help="Directory to scan for enum definitions",
    ),
    strategy: Optional[str] = typer.Option(
        None,
        "--strategy",
        "-s",
        help="Extraction strategy (default: annotation, or from config)",
    ),
    types: Optional[str] = typer.Option(
        None,
        "--types",
        "-t",
        help="Comma-separated type names for the 'const' strategy",
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive",
        "-r",
        help="Recursively scan subdirectories",
    ),
    output_format: str = typer.Option(
        OutputFormat.TEXT.value,
        "--output-format",
        "-F",
        help="Output format: 'text' or 'json'",
    ),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output-file",
        help="Write JSON output to file instead of stdout",
    ),
) -> None:
    """
    List the enum definitions found in a directory without generating code.

    Examples:

        enumgen inspect ./models

        enumgen inspect ./models --strategy tag --output-format json
    """
    config = load_config()

    strategy = strategy or config.strategy or ExtractionStrategy.ANNOTATION.value
    recursive = recursive or bool(config.recursive)
    type_names = _resolve_type_names(types, config)

    if output_format not in [fmt.value for fmt in OutputFormat]:
        err_console.print(
            f"[red]Error:[/red] Invalid output format '{output_format}'. "
            "Use 'text' or 'json'."
        )
        raise typer.Exit(1)

    _check_const_types(strategy, type_names)

    try:
        scan, enums = _extract(directory, strategy, type_names, recursive)
        report = ExtractionReport(
            directory=str(directory),
            strategy=strategy,
            package=scan.package,
            packages=scan.packages,
            enums=enums,
        )

        if output_format == OutputFormat.JSON.value:
            OutputWriter.write(ReportJsonFormatter.format(report), output_file)
            if output_file:
                console.print(f"[green]Success:[/green] Report written to {output_file}")
        else:
            ReportTextFormatter.format(report, console)

    except ScanError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except ExtractorError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except ExtractionError as e:
        err_console.print(f"[red]Error:[/red] Invalid enum declaration: {e}")
        raise typer.Exit(1)


@app.command()
def strategies() -> None:
    """List the available extraction strategies."""
    available = list_extractors()
    if available:
        console.print("[bold]Available strategies:[/bold]")
        for name in available:
            console.print(f"  - {name}")
    else:
        console.print("[yellow]No strategies available[/yellow]")


if __name__ == "__main__":
    app()
