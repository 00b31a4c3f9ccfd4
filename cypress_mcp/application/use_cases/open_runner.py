import shlex

from loguru import logger

from cypress_mcp.application.services.invocation_builder import build_open_command
from cypress_mcp.domain.value_objects.app_config import CypressSettings
from cypress_mcp.domain.value_objects.operation_results import OpenInstructions
from cypress_mcp.domain.value_objects.run_options import RunOptions


class OpenRunner:
    """Explains how to open the interactive Test Runner.

    The server has no display session, so launching the GUI is never
    attempted; the caller gets the command to run by hand instead.
    """

    def __init__(self, settings: CypressSettings):
        self.settings = settings

    async def execute(self, options: RunOptions) -> OpenInstructions:
        argv, cwd = build_open_command(options, self.settings)
        command = shlex.join(argv)
        logger.info("Interactive runner requested; returning manual command: {}", command)
        return OpenInstructions(
            message=(
                "The Cypress Test Runner needs an interactive display session and "
                "cannot be opened from this server. Run the command below in the "
                "project directory instead."
            ),
            command=command,
            cwd=str(cwd),
        )
