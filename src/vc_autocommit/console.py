"""
Console output helpers for vc_autocommit.

User-facing status lines are written with ``click.echo`` and colored by
severity: green for success, yellow for warnings, blue for retry notices
and red for errors. These lines are for humans only and are kept apart
from the :mod:`logging` output enabled by ``--verbose``.
"""

from __future__ import annotations

import time
from typing import Optional

import click


class ProgressIndicator:
    """Context manager printing a message and the elapsed time."""

    def __init__(self, message: str) -> None:
        self.message = message
        self.start_time: Optional[float] = None

    def __enter__(self) -> "ProgressIndicator":
        self.start_time = time.time()
        click.echo(f"→ {self.message}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        elapsed = time.time() - (self.start_time or time.time())
        if exc_type is None:
            click.echo(f"  ✓ Done ({elapsed:.1f}s)")
        return False


def print_banner(title: str) -> None:
    click.echo("\n" + "=" * 60)
    click.echo(title.center(60))
    click.echo("=" * 60)


def print_step(step_num: int, total_steps: int, message: str) -> None:
    """Print a step indicator."""
    click.echo(f"\n{'=' * 60}")
    click.echo(f"Step {step_num}/{total_steps}: {message}")
    click.echo(f"{'=' * 60}")


def print_info(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}✓ {message}", fg="green"))


def print_warning(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}⚠ {message}", fg="yellow"))


def print_retry(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}↻ {message}", fg="blue"))


def print_error(message: str, detail: Optional[str] = None, indent: int = 0) -> None:
    """Print an error message, followed by its detail if one is given."""
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}✗ {message}", fg="red"), err=True)
    if detail:
        click.echo(click.style(f"{prefix}  {detail}", fg="yellow"), err=True)


class ConsoleReporter:
    """Reporter handed to the orchestrator; writes to the terminal."""

    def info(self, message: str) -> None:
        print_info(message)

    def success(self, message: str) -> None:
        print_success(message)

    def warning(self, message: str) -> None:
        print_warning(message)

    def retry(self, message: str) -> None:
        print_retry(message)

    def error(self, message: str, detail: Optional[str] = None) -> None:
        print_error(message, detail)
