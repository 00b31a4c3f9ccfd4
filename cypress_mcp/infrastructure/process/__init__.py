from cypress_mcp.infrastructure.process.bounded_output import BoundedOutput
from cypress_mcp.infrastructure.process.cypress_process import CypressProcessRunner, ProcessOutcome
from cypress_mcp.infrastructure.process.tool_probe import ToolAvailabilityProbe

__all__ = ["BoundedOutput", "CypressProcessRunner", "ProcessOutcome", "ToolAvailabilityProbe"]
