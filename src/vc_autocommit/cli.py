"""
Command line interface for the vc_autocommit tool.

This module defines the ``main`` function used as the entry point of the
``autocommit`` command. It checks the repository, scans the target
folder, asks the operator how many commits to create, and hands the
resulting plan to the :class:`CommitOrchestrator`. Exit codes are listed
below.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from vc_autocommit import __version__
from vc_autocommit.commit.orchestrator import TARGET_FOLDER, CommitOrchestrator, CommitReport
from vc_autocommit.config.loader import ConfigError, load_config
from vc_autocommit.console import (
    ConsoleReporter,
    ProgressIndicator,
    print_banner,
    print_error,
    print_info,
    print_step,
    print_success,
    print_warning,
)
from vc_autocommit.planning.file_enumerator import DirectoryNotFoundError, list_files
from vc_autocommit.planning.message_generator import EmptyFileSetError, generate_commit_messages
from vc_autocommit.vcs.git_client import GitClient, GitError, GitErrorKind

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_INPUT = 2
EXIT_NO_REPO = 3
EXIT_NO_FILES = 4
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6
EXIT_INCOMPLETE = 7

COMMIT_COUNT_PROMPT = "How many commits do you want to generate?"


def configure_logging(verbose: bool) -> None:
    """Configure the root logger and let package loggers propagate to it."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    # Module loggers start detached (NullHandler, no propagation).
    for name in list(logging.root.manager.loggerDict):
        if name == "vc_autocommit" or name.startswith("vc_autocommit."):
            logging.getLogger(name).propagate = True


def parse_commit_count(text: str) -> Optional[int]:
    """Return ``text`` as a positive integer, or ``None`` if it is not one."""
    try:
        number = int(text.strip())
    except ValueError:
        return None
    return number if number >= 1 else None


def ask_commit_count() -> int:
    """Ask the operator for the number of commits.

    An invalid answer is fatal: the process exits with
    ``EXIT_INVALID_INPUT`` without asking again.
    """
    # An empty default hands a blank answer to the parser instead of re-asking.
    answer = click.prompt(
        f"🧠 {COMMIT_COUNT_PROMPT}",
        type=str,
        default="",
        show_default=False,
        prompt_suffix=" ",
    )
    number = parse_commit_count(answer)
    if number is None:
        print_error("Invalid number.")
        raise click.exceptions.Exit(EXIT_INVALID_INPUT)
    return number


def report_git_error(exc: GitError) -> int:
    """Print the message for a Git failure and return the exit code."""
    if exc.kind is GitErrorKind.NOT_A_REPOSITORY:
        print_error("Git repository not found. Please initialize using 'git init'.")
        return EXIT_NO_REPO
    if exc.kind is GitErrorKind.PERMISSION_DENIED:
        print_error("Permission error. Check SSH keys or Git credentials.")
        return EXIT_VCS_FAILURE
    print_error("Unexpected error occurred", str(exc))
    return EXIT_VCS_FAILURE


def print_summary(report: CommitReport) -> None:
    """Print what the commit loop achieved."""
    click.echo(f"\n{'=' * 60}")
    click.echo("✨ Summary")
    click.echo(f"{'=' * 60}")
    print_success(f"Committed: {len(report.committed)}/{report.planned}", indent=1)
    print_info(f"Attempts: {len(report.attempts)}", indent=1)
    if report.aborted:
        print_warning(f"Abandoned: {report.abandoned}", indent=1)


@click.command()
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    help="Number of commits to create. Prompts when omitted.",
)
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="autocommit")
def main(count: Optional[int], verbose: bool) -> None:
    """Create a series of paced commits from the files in the Test folder.

    Each commit message names a file and its line count. Commits are spaced
    by a random delay, failed commits are retried, and everything is pushed
    at the end.
    """
    configure_logging(verbose)

    print_banner("🕒 Auto Commit")
    total_steps = 4

    try:
        # Step 1: configuration and repository
        print_step(1, total_steps, "Checking Repository")
        try:
            config = load_config()
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        orchestrator = CommitOrchestrator(
            GitClient(Path.cwd()),
            reporter=ConsoleReporter(),
            max_retries=config["max_retries"],
            min_delay_ms=config["min_delay_ms"],
            max_delay_ms=config["max_delay_ms"],
        )
        with ProgressIndicator("Checking Git status"):
            orchestrator.check_repository()
        print_success("Git repository is ready")

        # Step 2: scan the target folder
        print_step(2, total_steps, f"Scanning '{TARGET_FOLDER}' Folder")
        with ProgressIndicator("Listing files"):
            files = list_files(TARGET_FOLDER)
        if not files:
            raise EmptyFileSetError(f"No files found in the {TARGET_FOLDER} folder.")
        print_success(f"Found {len(files)} file{'s' if len(files) != 1 else ''}")

        # Step 3: plan
        print_step(3, total_steps, "Planning Commits")
        if count is None:
            count = ask_commit_count()
        plan = generate_commit_messages(files, count)
        print_success(f"Planned {len(plan)} commit{'s' if len(plan) != 1 else ''}")
        for message in plan.messages[:5]:
            print_info(message, indent=1)
        if len(plan) > 5:
            print_info(f"... and {len(plan) - 5} more", indent=1)

        # Step 4: commit and push
        print_step(4, total_steps, "Committing")
        report = orchestrator.run(plan)
        click.echo(click.style("\n🚀 All commits pushed successfully.", fg="bright_blue"))

        print_summary(report)

        if report.aborted:
            print_warning("Stopped early after repeated failures.")
            raise click.exceptions.Exit(EXIT_INCOMPLETE)
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except (click.exceptions.Exit, click.exceptions.Abort):
        # Click handles its own exit and abort (Ctrl-C, EOF at the prompt)
        raise
    except GitError as exc:
        raise click.exceptions.Exit(report_git_error(exc))
    except (DirectoryNotFoundError, EmptyFileSetError) as exc:
        print_error(str(exc))
        raise click.exceptions.Exit(EXIT_NO_FILES)
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        raise click.exceptions.Exit(EXIT_GENERIC_ERROR)
