class HarnessError(RuntimeError):
    """Base error for conditions that abort a benchmark.

    Attributes:
        kind: Error category for programmatic handling.
    """

    kind = "harness_error"


class InvalidCountError(HarnessError, ValueError):
    """Repetition count is missing, non-numeric, or not positive."""

    kind = "invalid_count"


class LaunchFailure(HarnessError):
    """The operating system could not start the target program.

    Distinct from a run that started and exited non-zero: no timing exists.
    """

    kind = "launch_failure"

    def __init__(self, program: str, reason: str):
        super().__init__(f"Failed to launch '{program}': {reason}")
        self.program = program
        self.reason = reason
