import logging
from collections.abc import Callable

import click

from .config import HarnessConfig
from .durations import format_duration, mean_duration
from .errors import InvalidCountError
from .invoker import invoke
from .models import BenchmarkSummary, RunResult, RunSpec

logger = logging.getLogger(__name__)

Invoker = Callable[..., RunResult]


def truncate_text(value: str, max_len: int) -> str:
    if max_len <= 0 or len(value) <= max_len:
        return value
    suffix = f"... [truncated, len={len(value)}]"
    if max_len <= len(suffix):
        return value[:max_len]
    return f"{value[: max_len - len(suffix)]}{suffix}"


def validate_count(count: object) -> int:
    # bool is an int subclass; True must not mean "one run"
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCountError(f"Repetition count must be an integer, got {count!r}")
    if count <= 0:
        raise InvalidCountError(f"Repetition count must be a positive integer, got {count}")
    return count


class BenchmarkRunner:
    def __init__(
        self,
        config: HarnessConfig | None = None,
        *,
        invoker: Invoker = invoke,
        echo: Callable[[str], None] = click.echo,
    ):
        self.config = config or HarnessConfig()
        self.invoker = invoker
        self.echo = echo

    def run(self, spec: RunSpec, count: int) -> BenchmarkSummary:
        """Invoke ``spec`` ``count`` times in sequence and report the mean.

        Failed runs are reported and still count toward the mean. A
        ``LaunchFailure`` from the invoker propagates immediately and the
        partial history is dropped.
        """
        count = validate_count(count)
        history: list[int] = []
        succeeded = 0

        for i in range(count):
            current = i + 1
            result = self.invoker(spec, capture_stdout=self.config.capture_stdout)
            history.append(result.duration_ns)
            if result.succeeded:
                succeeded += 1
            logger.debug(
                "Run %d/%d succeeded=%s duration_ns=%d",
                current,
                count,
                result.succeeded,
                result.duration_ns,
            )
            self._report_run(current, count, result)

        total_ns = sum(history)
        summary = BenchmarkSummary(
            spec=spec,
            count=count,
            succeeded=succeeded,
            failed=count - succeeded,
            total_ns=total_ns,
            mean_ns=mean_duration(total_ns, count),
            durations_ns=tuple(history),
        )
        self._report_summary(summary)
        return summary

    def _report_run(self, current: int, total: int, result: RunResult) -> None:
        if result.succeeded:
            self.echo(
                f"Run {current}/{total}: succeeded in {format_duration(result.duration_ns)}"
            )
            return

        self.echo(f"Run {current}/{total}: failed ({result.describe_status()})")
        stderr_text = result.stderr_text.rstrip()
        if stderr_text:
            stderr_text = truncate_text(stderr_text, self.config.stderr_max_chars)
            self.echo(f"  Error: {stderr_text}")
        else:
            self.echo("  Error: (no stderr output)")

    def _report_summary(self, summary: BenchmarkSummary) -> None:
        if summary.failed:
            self.echo(f"{summary.failed} of {summary.count} runs failed")
        self.echo(f"Total execution time: {format_duration(summary.total_ns)}")
        self.echo(f"Average execution time: {format_duration(summary.mean_ns)}")
