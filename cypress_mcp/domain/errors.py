from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from cypress_mcp.domain.value_objects.run_record import RunRecord


class ErrorKind(str, Enum):
    PERMISSION_DENIED = "PermissionDenied"
    UNKNOWN_COMMAND = "UnknownCommand"
    DEPENDENCY_MISSING = "DependencyMissing"
    PROCESS_SPAWN_FAILED = "ProcessSpawnFailed"
    PROCESS_EXITED_NON_ZERO = "ProcessExitedNonZero"
    NOT_FOUND = "NotFound"
    MISSING_ARGUMENT = "MissingArgument"


class CypressMCPError(Exception):
    """Base class for every failure the command core reports to callers."""

    kind: ClassVar[ErrorKind]


class PermissionDeniedError(CypressMCPError):
    """Raised when a command is not in the configured allow-list."""

    kind = ErrorKind.PERMISSION_DENIED

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Command {command} is not allowed by security configuration")


class UnknownCommandError(CypressMCPError):
    kind = ErrorKind.UNKNOWN_COMMAND

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Unknown command: {command}")


class DependencyMissingError(CypressMCPError):
    """Raised when the Cypress executable cannot be resolved on PATH."""

    kind = ErrorKind.DEPENDENCY_MISSING

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(
            f"Cypress executable '{executable}' was not found on PATH. "
            "Install Cypress or set cypress.executable in the configuration."
        )


class ProcessSpawnFailedError(CypressMCPError):
    kind = ErrorKind.PROCESS_SPAWN_FAILED


class ProcessExitedNonZeroError(CypressMCPError):
    """Raised after a run finished with a non-zero exit code.

    The run record has already been stored when this is raised, so callers
    can still fetch it with getResults.
    """

    kind = ErrorKind.PROCESS_EXITED_NON_ZERO

    def __init__(self, record: "RunRecord") -> None:
        self.record = record
        super().__init__(f"{record.message} (runId: {record.run_id})")


class NotFoundError(CypressMCPError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, run_id: str) -> None:
        self.run_id = run_id
        super().__init__(f"No results found for runId: {run_id}")


class MissingArgumentError(CypressMCPError):
    kind = ErrorKind.MISSING_ARGUMENT
