"""Named tools exposed to remote callers and the commands they map to."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from cypress_mcp.application.dto.requests import (
    ArtifactQuery,
    GenerateRequest,
    ResultsQuery,
    ValidateRequest,
)
from cypress_mcp.domain.value_objects.command_name import CommandName
from cypress_mcp.domain.value_objects.run_options import RunOptions


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    command: CommandName
    description: str
    input_model: type[BaseModel]

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "command": self.command.value,
            "description": self.description,
            "inputSchema": self.input_model.model_json_schema(by_alias=True),
        }


TOOLS = (
    ToolDefinition(
        "cypress_run",
        CommandName.RUN,
        "Run Cypress tests with specified options. Returns the run record "
        "including exit code, bounded output and run ID.",
        RunOptions,
    ),
    ToolDefinition(
        "cypress_open",
        CommandName.OPEN,
        "Get the command that opens the Cypress Test Runner for interactive debugging.",
        RunOptions,
    ),
    ToolDefinition(
        "cypress_validate",
        CommandName.VALIDATE,
        "Validate a Cypress test file or test code for common structure and commands.",
        ValidateRequest,
    ),
    ToolDefinition(
        "cypress_generate",
        CommandName.GENERATE,
        "Generate a Cypress test file from a description.",
        GenerateRequest,
    ),
    ToolDefinition(
        "cypress_get_results",
        CommandName.GET_RESULTS,
        "Get results of a previous run by run ID, or all results if no ID provided.",
        ResultsQuery,
    ),
    ToolDefinition(
        "cypress_get_screenshots",
        CommandName.GET_SCREENSHOTS,
        "Get screenshots captured during test runs.",
        ArtifactQuery,
    ),
    ToolDefinition(
        "cypress_get_videos",
        CommandName.GET_VIDEOS,
        "Get videos recorded during test runs.",
        ArtifactQuery,
    ),
)

TOOLS_BY_NAME = {tool.name: tool for tool in TOOLS}


def resolve_command(name: str) -> str:
    """Map a tool name to its command name; other names pass through."""
    tool = TOOLS_BY_NAME.get(name)
    return tool.command.value if tool else name


def list_tools() -> list[dict[str, Any]]:
    return [tool.to_payload() for tool in TOOLS]
