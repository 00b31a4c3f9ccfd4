import shlex
import shutil
import threading
from collections.abc import Callable

from loguru import logger

from cypress_mcp.domain.errors import DependencyMissingError
from cypress_mcp.domain.value_objects.tool_availability import ToolAvailability


class ToolAvailabilityProbe:
    """Checks once whether the Cypress executable resolves on PATH.

    The answer, positive or negative, is remembered for the life of the
    process. Tests and long-running servers can call reset() to probe
    again after the environment changed.
    """

    def __init__(
        self,
        executable: str,
        which: Callable[[str], str | None] = shutil.which,
    ) -> None:
        self.program = shlex.split(executable)[0]
        self._which = which
        self._state = ToolAvailability.UNCHECKED
        self._resolved_path: str | None = None
        self._lock = threading.Lock()

    @property
    def state(self) -> ToolAvailability:
        return self._state

    @property
    def resolved_path(self) -> str | None:
        return self._resolved_path

    def check(self) -> ToolAvailability:
        with self._lock:
            if self._state == ToolAvailability.UNCHECKED:
                self._resolved_path = self._which(self.program)
                if self._resolved_path:
                    self._state = ToolAvailability.AVAILABLE
                    logger.info("Cypress executable resolved: {}", self._resolved_path)
                else:
                    self._state = ToolAvailability.UNAVAILABLE
                    logger.warning("Cypress executable '{}' not found on PATH", self.program)
            return self._state

    def require(self) -> None:
        """Raise DependencyMissingError unless the executable is available."""
        if self.check() != ToolAvailability.AVAILABLE:
            raise DependencyMissingError(self.program)

    def reset(self) -> None:
        with self._lock:
            self._state = ToolAvailability.UNCHECKED
            self._resolved_path = None
