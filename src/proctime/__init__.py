__version__ = "0.1.0"

from .errors import HarnessError, InvalidCountError, LaunchFailure
from .invoker import invoke
from .models import BenchmarkSummary, RunResult, RunSpec
from .runner import BenchmarkRunner

__all__ = [
    "__version__",
    "BenchmarkRunner",
    "BenchmarkSummary",
    "HarnessError",
    "InvalidCountError",
    "LaunchFailure",
    "RunResult",
    "RunSpec",
    "invoke",
]
