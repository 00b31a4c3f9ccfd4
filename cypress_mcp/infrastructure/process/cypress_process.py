import asyncio
import contextlib
import os
import signal
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from cypress_mcp.domain.errors import ProcessSpawnFailedError
from cypress_mcp.domain.value_objects.run_record import OUTPUT_BYTE_BUDGET
from cypress_mcp.infrastructure.process.bounded_output import BoundedOutput

READ_CHUNK_SIZE = 4096


@dataclass
class ProcessOutcome:
    exit_code: int
    stdout: BoundedOutput
    stderr: BoundedOutput
    duration_ms: int
    timed_out: bool = False


class CypressProcessRunner:
    """Spawn the Cypress CLI and capture its output incrementally.

    Both pipes are drained concurrently in small chunks while the process
    runs, so a chatty or hung child never blocks the event loop and memory
    stays bounded by the output budget.
    """

    def __init__(
        self,
        output_budget: int = OUTPUT_BYTE_BUDGET,
        chunk_size: int = READ_CHUNK_SIZE,
    ) -> None:
        self.output_budget = output_budget
        self.chunk_size = chunk_size

    async def execute(
        self,
        argv: Sequence[str],
        cwd: Path,
        env: Mapping[str, str],
        timeout_s: float | None = None,
    ) -> ProcessOutcome:
        start = time.monotonic()

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                cwd=str(cwd),
                env=dict(env),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,  # own process group so a timeout kills the browser too
            )
        except OSError as e:
            raise ProcessSpawnFailedError(f"Failed to start {argv[0]}: {e}") from e

        stdout = BoundedOutput(self.output_budget)
        stderr = BoundedOutput(self.output_budget)
        assert proc.stdout is not None and proc.stderr is not None

        collect = asyncio.gather(
            self._drain(proc.stdout, stdout),
            self._drain(proc.stderr, stderr),
            proc.wait(),
        )

        timed_out = False
        try:
            if timeout_s is None:
                await collect
            else:
                await asyncio.wait_for(collect, timeout=timeout_s)
        except TimeoutError:
            timed_out = True
            logger.warning("Process {} exceeded {}s, killing process group", proc.pid, timeout_s)
            self._kill_group(proc)
            await proc.wait()
        except asyncio.CancelledError:
            self._kill_group(proc)
            raise

        duration_ms = int((time.monotonic() - start) * 1000)
        exit_code = -1 if timed_out else (proc.returncode if proc.returncode is not None else -1)

        return ProcessOutcome(
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
            duration_ms=duration_ms,
            timed_out=timed_out,
        )

    async def _drain(self, stream: asyncio.StreamReader, sink: BoundedOutput) -> None:
        while chunk := await stream.read(self.chunk_size):
            sink.feed(chunk)

    @staticmethod
    def _kill_group(proc: asyncio.subprocess.Process) -> None:
        try:
            os.killpg(os.getpgid(proc.pid), signal.SIGKILL)
        except (ProcessLookupError, OSError):
            # Group already gone
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
