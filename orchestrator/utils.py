"""Utility functions for the schedule CLI."""
from pathlib import Path

from rich.console import Console

console = Console()
err_console = Console(stderr=True)

SCHEDULE_SUFFIXES = (".txt", ".csv", ".pdf")


def expand_schedule_paths(paths: tuple[str, ...]) -> list[str]:
    """Expand paths to include all schedule files in directories.

    URLs are passed through unchanged.

    Args:
        paths: Tuple of file paths, directory paths and/or URLs

    Returns:
        List of schedule file paths with directories expanded

    Raises:
        SystemExit: If a directory contains no schedule files or a path is missing
    """
    schedule_files: list[str] = []

    for path_str in paths:
        if path_str.startswith(("http://", "https://")):
            schedule_files.append(path_str)
            continue

        path = Path(path_str)

        if path.is_file():
            schedule_files.append(path_str)
        elif path.is_dir():
            found = sorted(p for p in path.iterdir() if p.suffix.lower() in SCHEDULE_SUFFIXES)

            if not found:
                err_console.print(
                    f"[red]Error:[/red] Directory '{path_str}' contains no schedule files.",
                )
                raise SystemExit(1)

            schedule_files.extend(str(p) for p in found)
        else:
            err_console.print(
                f"[red]Error:[/red] Path '{path_str}' does not exist.",
            )
            raise SystemExit(1)

    return schedule_files
