import signal
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class RunSpec:
    path: str
    args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("program path must be a non-empty string")
        # Accept any sequence of str but store it immutably
        object.__setattr__(self, "args", tuple(self.args))
        for arg in self.args:
            if not isinstance(arg, str):
                raise TypeError(f"program arguments must be str, got {type(arg).__name__}")

    @property
    def argv(self) -> list[str]:
        return [self.path, *self.args]


@dataclass(frozen=True)
class RunResult:
    succeeded: bool
    stderr_text: str
    duration_ns: int
    returncode: int = 0

    def describe_status(self) -> str:
        if self.returncode >= 0:
            return f"exit status {self.returncode}"
        signum = -self.returncode
        try:
            name = signal.Signals(signum).name
        except ValueError:
            return f"terminated by signal {signum}"
        return f"terminated by signal {signum} ({name})"


@dataclass
class BenchmarkSummary:
    spec: RunSpec
    count: int
    succeeded: int
    failed: int
    total_ns: int
    mean_ns: int
    durations_ns: tuple[int, ...]

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["spec"] = {"path": self.spec.path, "args": list(self.spec.args)}
        d["durations_ns"] = list(self.durations_ns)
        return d
