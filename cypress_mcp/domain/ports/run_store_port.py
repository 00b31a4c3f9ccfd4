from abc import ABC, abstractmethod

from cypress_mcp.domain.value_objects.run_record import RunRecord


class RunStorePort(ABC):
    """Port for run result bookkeeping."""

    @abstractmethod
    async def put(self, record: RunRecord) -> None:
        """Store a record under its run id, replacing any existing one."""

    @abstractmethod
    async def get(self, run_id: str) -> RunRecord | None:
        """Return the record for run_id, or None."""

    @abstractmethod
    async def list_all(self) -> list[RunRecord]:
        """Return every stored record in insertion order."""
