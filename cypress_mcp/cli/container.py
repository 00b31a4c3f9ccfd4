"""Wires the command core from a resolved AppConfig."""

from cypress_mcp.application.dispatcher import CommandDispatcher
from cypress_mcp.application.services.invocation_builder import resolve_project_path
from cypress_mcp.application.test_run_orchestrator import TestRunOrchestrator
from cypress_mcp.application.use_cases.generate_test import GenerateTest
from cypress_mcp.application.use_cases.get_artifacts import GetArtifacts
from cypress_mcp.application.use_cases.get_results import GetResults
from cypress_mcp.application.use_cases.open_runner import OpenRunner
from cypress_mcp.application.use_cases.validate_test import ValidateTest
from cypress_mcp.domain.ports.run_store_port import RunStorePort
from cypress_mcp.domain.ports.validation_port import ValidationStrategy
from cypress_mcp.domain.services.security_gate import SecurityGate
from cypress_mcp.domain.services.test_code_validator import HeuristicTestValidator
from cypress_mcp.domain.value_objects.app_config import AppConfig
from cypress_mcp.infrastructure.persistence.in_memory_run_store import InMemoryRunStore
from cypress_mcp.infrastructure.process.cypress_process import CypressProcessRunner
from cypress_mcp.infrastructure.process.tool_probe import ToolAvailabilityProbe


def build_dispatcher(
    config: AppConfig,
    store: RunStorePort | None = None,
    probe: ToolAvailabilityProbe | None = None,
    process_runner: CypressProcessRunner | None = None,
    validation_strategy: ValidationStrategy | None = None,
) -> CommandDispatcher:
    settings = config.cypress
    project_root = resolve_project_path(None, settings)

    orchestrator = TestRunOrchestrator(
        config=config,
        store=store or InMemoryRunStore(),
        probe=probe or ToolAvailabilityProbe(settings.executable),
        process_runner=process_runner,
    )

    return CommandDispatcher(
        gate=SecurityGate(config.security.allowed_commands),
        orchestrator=orchestrator,
        open_runner=OpenRunner(settings),
        validate_test=ValidateTest(validation_strategy or HeuristicTestValidator(), project_root),
        generate_test=GenerateTest(project_root),
        get_results=GetResults(orchestrator.store),
        get_artifacts=GetArtifacts(settings),
    )
