from cypress_mcp.domain.value_objects.app_config import (
    WILDCARD,
    AppConfig,
    CypressSettings,
    SecuritySettings,
    ServerSettings,
)
from cypress_mcp.domain.value_objects.artifact_types import (
    ArtifactKind,
    ArtifactListing,
    ArtifactRecord,
)
from cypress_mcp.domain.value_objects.browser import Browser
from cypress_mcp.domain.value_objects.command_name import CommandName
from cypress_mcp.domain.value_objects.operation_results import GeneratedTest, OpenInstructions
from cypress_mcp.domain.value_objects.run_options import RunOptions
from cypress_mcp.domain.value_objects.run_record import OUTPUT_BYTE_BUDGET, RunRecord
from cypress_mcp.domain.value_objects.tool_availability import ToolAvailability
from cypress_mcp.domain.value_objects.validation_report import ValidationReport

__all__ = [
    "OUTPUT_BYTE_BUDGET",
    "WILDCARD",
    "AppConfig",
    "ArtifactKind",
    "ArtifactListing",
    "ArtifactRecord",
    "Browser",
    "CommandName",
    "CypressSettings",
    "GeneratedTest",
    "OpenInstructions",
    "RunOptions",
    "RunRecord",
    "SecuritySettings",
    "ServerSettings",
    "ToolAvailability",
    "ValidationReport",
]
