# -*- coding: utf-8 -*-
import json
import logging
import sys

import click
import requests
from rich.panel import Panel
from rich.table import Table

from orchestrator.utils import console, err_console, expand_schedule_paths
from schedule_parser.config import load_config
from schedule_parser.errors import ScheduleParseError
from schedule_parser.file_utils import load_upload
from schedule_parser.logging_setup import setup_logging
from schedule_parser.models import ParseResult
from schedule_parser.normalizer import class_to_dict
from schedule_parser.pipeline import SchedulePipeline


def truncate(text: str, max_length: int = 40) -> str:
    """Truncate text to max_length characters, adding ellipsis if needed."""
    if len(text) <= max_length:
        return text
    return text[:max_length-3] + "..."


def location_label(parsed_class) -> str:
    parts = [parsed_class.building, parsed_class.room_number]
    label = " ".join(p for p in parts if p)
    if parsed_class.floor:
        label = f"{label} (floor {parsed_class.floor})" if label else f"floor {parsed_class.floor}"
    return label


def create_classes_table(title: str, result: ParseResult) -> Table:
    """Create a table listing the parsed classes of one file."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Course", style="white")
    table.add_column("Days", style="cyan")
    table.add_column("Time", style="yellow")
    table.add_column("Location", style="green")
    table.add_column("Professor", style="dim")

    for parsed_class in result.classes:
        course = parsed_class.course_name
        if parsed_class.course_code:
            course = f"{parsed_class.course_code} {course}"
        table.add_row(
            truncate(course),
            ", ".join(day[:3] for day in parsed_class.days_of_week),
            f"{parsed_class.start_time}-{parsed_class.end_time}",
            location_label(parsed_class),
            parsed_class.professor or "",
        )
    return table


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("schedule_files", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON instead of tables.")
@click.option("--model", "models", multiple=True, help="Model to try, in order. Repeatable; overrides SCHEDULE_PARSER_MODELS.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def main(schedule_files: tuple[str, ...], as_json: bool, models: tuple[str, ...], verbose: bool) -> None:
    """Extract classes from SCHEDULE_FILES (text, CSV or PDF files, directories or URLs)."""
    setup_logging(logging.INFO if verbose else logging.WARNING, stream=sys.stderr)

    pipeline = SchedulePipeline(load_config(models=models or None))
    paths = expand_schedule_paths(schedule_files)

    results: dict[str, dict] = {}
    failed = False
    for path in paths:
        try:
            result = pipeline.parse_schedule(load_upload(path))
        except (ScheduleParseError, OSError, requests.RequestException) as e:
            err_console.print(f"[red]Error:[/red] {path}: {e}")
            failed = True
            continue

        if as_json:
            results[path] = {
                "classes": [class_to_dict(c) for c in result.classes],
                "warnings": result.warnings,
            }
            continue

        console.print(create_classes_table(f"📅 {path}", result))
        for warning in result.warnings:
            console.print(f"   [dim]{warning}[/dim]")
        console.print(Panel(f"{len(result.classes)} classes found", border_style="green", expand=False))

    if as_json:
        click.echo(json.dumps(results, indent=2, ensure_ascii=False))

    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
