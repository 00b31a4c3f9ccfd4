from collections.abc import Iterable

from cypress_mcp.domain.errors import PermissionDeniedError
from cypress_mcp.domain.value_objects.app_config import WILDCARD


class SecurityGate:
    """Allow-list check that runs before every command dispatch."""

    def __init__(self, allowed_commands: Iterable[str]) -> None:
        self.allowed_commands = frozenset(allowed_commands)

    def is_allowed(self, command: str) -> bool:
        return WILDCARD in self.allowed_commands or command in self.allowed_commands

    def check(self, command: str) -> None:
        """Raise PermissionDeniedError if command is not allowed."""
        if not self.is_allowed(command):
            raise PermissionDeniedError(command)
