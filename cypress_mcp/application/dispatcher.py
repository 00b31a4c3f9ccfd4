from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from loguru import logger

from cypress_mcp.application.dto.requests import (
    ArtifactQuery,
    GenerateRequest,
    ResultsQuery,
    ValidateRequest,
)
from cypress_mcp.application.test_run_orchestrator import TestRunOrchestrator
from cypress_mcp.application.use_cases.generate_test import GenerateTest
from cypress_mcp.application.use_cases.get_artifacts import GetArtifacts
from cypress_mcp.application.use_cases.get_results import GetResults
from cypress_mcp.application.use_cases.open_runner import OpenRunner
from cypress_mcp.application.use_cases.validate_test import ValidateTest
from cypress_mcp.domain.errors import PermissionDeniedError, UnknownCommandError
from cypress_mcp.domain.services.security_gate import SecurityGate
from cypress_mcp.domain.value_objects.artifact_types import ArtifactListing
from cypress_mcp.domain.value_objects.command_name import CommandName
from cypress_mcp.domain.value_objects.operation_results import GeneratedTest, OpenInstructions
from cypress_mcp.domain.value_objects.run_options import RunOptions
from cypress_mcp.domain.value_objects.run_record import RunRecord
from cypress_mcp.domain.value_objects.validation_report import ValidationReport

CommandResult = (
    RunRecord
    | list[RunRecord]
    | OpenInstructions
    | ValidationReport
    | GeneratedTest
    | ArtifactListing
)

Handler = Callable[[dict[str, Any]], Awaitable[CommandResult]]


class CommandDispatcher:
    """Single entry point for every command a remote caller can issue.

    The security gate is consulted before anything else, so a denied
    command never reaches a subprocess or the filesystem.
    """

    def __init__(
        self,
        gate: SecurityGate,
        orchestrator: TestRunOrchestrator,
        open_runner: OpenRunner,
        validate_test: ValidateTest,
        generate_test: GenerateTest,
        get_results: GetResults,
        get_artifacts: GetArtifacts,
    ) -> None:
        self.gate = gate
        self._handlers: dict[CommandName, Handler] = {
            CommandName.RUN: lambda args: orchestrator.run(RunOptions.model_validate(args)),
            CommandName.OPEN: lambda args: open_runner.execute(RunOptions.model_validate(args)),
            CommandName.VALIDATE: lambda args: validate_test.execute(
                ValidateRequest.model_validate(args)
            ),
            CommandName.GENERATE: lambda args: generate_test.execute(
                GenerateRequest.model_validate(args)
            ),
            CommandName.GET_RESULTS: lambda args: get_results.execute(
                ResultsQuery.model_validate(args)
            ),
            CommandName.GET_SCREENSHOTS: lambda args: get_artifacts.screenshots(
                ArtifactQuery.model_validate(args)
            ),
            CommandName.GET_VIDEOS: lambda args: get_artifacts.videos(
                ArtifactQuery.model_validate(args)
            ),
        }

    async def execute(
        self,
        command: str,
        args: Mapping[str, Any] | None = None,
    ) -> CommandResult:
        """Check the allow-list, then run the handler for command.

        Handler errors are logged with the command and its arguments and
        re-raised unchanged.
        """
        args = dict(args or {})
        log = logger.bind(command=command, args=args)
        log.info("Executing Cypress command: {}", command)

        try:
            self.gate.check(command)
        except PermissionDeniedError:
            log.error("Command {} rejected by security configuration", command)
            raise

        try:
            try:
                name = CommandName(command)
            except ValueError:
                raise UnknownCommandError(command) from None
            return await self._handlers[name](args)
        except Exception as e:
            log.error("Error executing command {}: {}", command, e)
            raise
