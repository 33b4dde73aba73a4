import logging
import subprocess  # nosec B404 - runs the program under benchmark
import time

import psutil

from .errors import LaunchFailure
from .models import RunResult, RunSpec

logger = logging.getLogger(__name__)


def start_process(spec: RunSpec, *, capture_stdout: bool = True) -> subprocess.Popen[bytes]:
    """Start the target with a discrete argv; nothing is passed through a shell."""
    logger.debug("Starting target: %r", spec.argv)
    try:
        return subprocess.Popen(  # nosec B603 - argv list, no shell
            spec.argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE if capture_stdout else subprocess.DEVNULL,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        reason = exc.strerror or str(exc)
        # Reported to the user by the caller; keep the log quiet by default
        logger.debug("Cannot launch %s: %s", spec.path, reason)
        raise LaunchFailure(spec.path, reason) from exc


def invoke(spec: RunSpec, *, capture_stdout: bool = True) -> RunResult:
    """Run ``spec`` once and wait for it to exit.

    The measured duration spans process creation through observed termination.
    There is no timeout: a child that never exits blocks here indefinitely.

    Raises:
        LaunchFailure: If the OS cannot start the program.
    """
    start = time.perf_counter_ns()
    process = start_process(spec, capture_stdout=capture_stdout)
    try:
        _, stderr = process.communicate()
    except KeyboardInterrupt:
        logger.warning("Interrupted; killing pid %d and its children", process.pid)
        try:
            target = psutil.Process(process.pid)
            victims = [*target.children(recursive=True), target]
        except psutil.Error:
            victims = []
        for victim in victims:
            try:
                victim.kill()
            except psutil.Error:
                pass
        process.wait()
        for stream in (process.stdout, process.stderr):
            if stream:
                stream.close()
        raise
    duration_ns = time.perf_counter_ns() - start

    returncode = process.returncode
    succeeded = returncode == 0
    # Diagnostics are only kept for failed runs
    result = RunResult(
        succeeded=succeeded,
        stderr_text="" if succeeded or not stderr else stderr.decode("utf-8", errors="replace"),
        duration_ns=duration_ns,
        returncode=returncode,
    )
    logger.debug("pid %d exited with %d after %d ns", process.pid, returncode, duration_ns)
    return result
