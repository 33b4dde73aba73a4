import logging
import os
import re
import shlex
import sys
from dataclasses import replace
from pathlib import Path
from typing import TextIO

import click
from dotenv import load_dotenv

from . import __version__
from .config import LOG_FORMAT, HarnessConfig
from .errors import HarnessError, InvalidCountError
from .models import RunSpec
from .runner import BenchmarkRunner, validate_count

logger = logging.getLogger(__name__)

COUNT_PROMPT = "Enter the number of times to execute the program:"

_COUNT_RE = re.compile(r"\+?[0-9]+")


def parse_count(text: str) -> int:
    """Parse one line of user input as a positive repetition count."""
    stripped = text.strip()
    if not stripped:
        raise InvalidCountError("No repetition count given; please enter a positive integer")
    if not _COUNT_RE.fullmatch(stripped):
        raise InvalidCountError(f"Please enter a positive integer, got {stripped!r}")
    return validate_count(int(stripped))


def read_count(stream: TextIO) -> int:
    click.echo(COUNT_PROMPT)
    return parse_count(stream.readline())


def _load_env() -> None:
    dotenv_path = os.getenv("PROCTIME_DOTENV_PATH", "").strip()
    if not dotenv_path:
        load_dotenv()
        return
    path = Path(dotenv_path).expanduser()
    if path.exists():
        load_dotenv(path)
    else:
        click.echo(f"Warning: PROCTIME_DOTENV_PATH does not exist: {dotenv_path}", err=True)
        load_dotenv()  # Fallback to default search


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
@click.option(
    "--count",
    "-n",
    type=int,
    default=None,
    help="Number of runs (default: prompt on stdin)",
)
@click.option(
    "--capture-stdout/--discard-stdout",
    default=None,
    help="Pipe the target's stdout (default) or send it to the null device",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
@click.version_option(__version__, prog_name="proctime")
@click.argument("program")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(
    count: int | None,
    capture_stdout: bool | None,
    verbose: bool,
    program: str,
    args: tuple[str, ...],
) -> None:
    """Run PROGRAM with ARGS repeatedly and report the mean wall-clock time.

    Everything after PROGRAM is passed to it verbatim, without a shell.
    """
    _load_env()

    try:
        config = HarnessConfig.from_env()
    except RuntimeError as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)
    if capture_stdout is not None:
        config = replace(config, capture_stdout=capture_stdout)

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING),
        format=LOG_FORMAT,
    )

    if not program:
        raise click.BadParameter("must be a non-empty path", param_hint="'PROGRAM'")
    spec = RunSpec(path=program, args=args)

    try:
        if count is None:
            count = read_count(sys.stdin)
        else:
            count = validate_count(count)
    except InvalidCountError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Running {shlex.join(spec.argv)} {count} time(s)")
    runner = BenchmarkRunner(config)
    try:
        runner.run(spec, count)
    except HarnessError as e:
        logger.debug("Aborting after %s", e.kind)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nInterrupted", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
