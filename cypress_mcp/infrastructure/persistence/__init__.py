from cypress_mcp.infrastructure.persistence.in_memory_run_store import InMemoryRunStore

__all__ = ["InMemoryRunStore"]
