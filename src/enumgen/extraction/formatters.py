"""Output formatters for extraction reports."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from enumgen.extraction.models import ExtractionReport


class ReportTextFormatter:
    """Format extraction reports as Rich tables for terminal display."""

    @staticmethod
    def format(report: ExtractionReport, console: Console) -> None:
        """
        Format and print an extraction report as Rich tables.

        Creates one table per enum listing its generated constants and
        their string values.

        Args:
            report: The extraction report
            console: Rich Console instance for output
        """
        if not report.enums:
            console.print("[yellow]No enum definitions found.[/yellow]")
            return

        for i, enum_def in enumerate(report.enums):
            if i > 0:
                console.print()

            table = Table(
                title=f"{enum_def.name} ({report.strategy}, package {report.package})",
                title_style="bold",
            )
            table.add_column("Constant", style="cyan")
            table.add_column("Value", style="green")

            for constant, value in zip(enum_def.constant_names, enum_def.values):
                table.add_row(constant, value.string_value)

            console.print(table)
            console.print(f"[dim]Total: {len(enum_def.values)} value(s)[/dim]")


class ReportJsonFormatter:
    """Format extraction reports as JSON."""

    @staticmethod
    def format(report: ExtractionReport) -> str:
        """
        Format an extraction report as a JSON string.

        Args:
            report: The extraction report

        Returns:
            JSON-formatted string
        """
        return report.model_dump_json(indent=2)


class OutputWriter:
    """Write formatted output to file or stdout."""

    @staticmethod
    def write(content: str, output_file: Optional[Path] = None) -> None:
        """
        Write content to file or stdout.

        Args:
            content: The content to write
            output_file: Optional file path. If None, writes to stdout.
        """
        if output_file:
            output_file.write_text(content, encoding="utf-8")
        else:
            print(content)
