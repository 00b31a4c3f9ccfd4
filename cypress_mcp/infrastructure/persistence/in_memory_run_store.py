import threading

from loguru import logger

from cypress_mcp.domain.ports.run_store_port import RunStorePort
from cypress_mcp.domain.value_objects.run_record import RunRecord


class InMemoryRunStore(RunStorePort):
    """Process-lifetime run result store.

    The lock is only held for dict operations, never across an await, so
    concurrent run completions on the event loop (or from worker threads)
    cannot interleave partial updates.
    """

    def __init__(self, max_records: int | None = None) -> None:
        if max_records is not None and max_records < 1:
            raise ValueError("max_records must be at least 1")
        self.max_records = max_records
        self._records: dict[str, RunRecord] = {}
        self._lock = threading.Lock()

    async def put(self, record: RunRecord) -> None:
        evicted: list[str] = []
        with self._lock:
            # Re-inserting moves an overwritten id to the end
            self._records.pop(record.run_id, None)
            self._records[record.run_id] = record
            if self.max_records is not None:
                while len(self._records) > self.max_records:
                    oldest = next(iter(self._records))
                    del self._records[oldest]
                    evicted.append(oldest)
        for run_id in evicted:
            logger.info("Evicted run result {} (capacity {})", run_id, self.max_records)

    async def get(self, run_id: str) -> RunRecord | None:
        with self._lock:
            return self._records.get(run_id)

    async def list_all(self) -> list[RunRecord]:
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
