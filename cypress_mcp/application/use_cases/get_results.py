from cypress_mcp.application.dto.requests import ResultsQuery
from cypress_mcp.domain.errors import NotFoundError
from cypress_mcp.domain.ports.run_store_port import RunStorePort
from cypress_mcp.domain.value_objects.run_record import RunRecord


class GetResults:
    def __init__(self, store: RunStorePort):
        self.store = store

    async def execute(self, query: ResultsQuery) -> RunRecord | list[RunRecord]:
        """One record by run id, or every record when no id is given."""
        if query.run_id:
            record = await self.store.get(query.run_id)
            if record is None:
                raise NotFoundError(query.run_id)
            return record
        return await self.store.list_all()
