import logging
import os
from dataclasses import dataclass

from .compat import env_bool, env_int

logger = logging.getLogger(__name__)

__all__ = [
    "CAPTURE_STDOUT",
    "LOG_FORMAT",
    "LOG_LEVEL",
    "STDERR_MAX_CHARS",
    "HarnessConfig",
]

# Diagnostics only; the benchmark report itself is always printed
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

# Pipe the child's stdout and drop it after the run; when off, stdout goes to os.devnull
CAPTURE_STDOUT = True

# Truncate stderr shown in failed-run reports (0 = unlimited)
STDERR_MAX_CHARS = 0

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class HarnessConfig:
    log_level: str = LOG_LEVEL
    capture_stdout: bool = CAPTURE_STDOUT
    stderr_max_chars: int = STDERR_MAX_CHARS

    @classmethod
    def from_env(cls) -> "HarnessConfig":
        log_level = os.getenv("PROCTIME_LOG_LEVEL", "").strip().upper() or LOG_LEVEL
        if log_level not in _LOG_LEVELS:
            raise RuntimeError(
                f"PROCTIME_LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}, "
                f"got {log_level!r}"
            )

        stderr_max_chars = env_int("PROCTIME_STDERR_MAX_CHARS", default=STDERR_MAX_CHARS)
        if stderr_max_chars < 0:
            raise RuntimeError(
                f"PROCTIME_STDERR_MAX_CHARS must be >= 0, got {stderr_max_chars}"
            )

        capture_stdout = env_bool("PROCTIME_CAPTURE_STDOUT", default=CAPTURE_STDOUT)
        logger.debug(
            "Loaded config: log_level=%s capture_stdout=%s stderr_max_chars=%d",
            log_level,
            capture_stdout,
            stderr_max_chars,
        )
        return cls(
            log_level=log_level,
            capture_stdout=capture_stdout,
            stderr_max_chars=stderr_max_chars,
        )
