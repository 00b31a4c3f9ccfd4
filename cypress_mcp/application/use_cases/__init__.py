from cypress_mcp.application.use_cases.generate_test import GenerateTest
from cypress_mcp.application.use_cases.get_artifacts import GetArtifacts
from cypress_mcp.application.use_cases.get_results import GetResults
from cypress_mcp.application.use_cases.open_runner import OpenRunner
from cypress_mcp.application.use_cases.validate_test import ValidateTest

__all__ = ["GenerateTest", "GetArtifacts", "GetResults", "OpenRunner", "ValidateTest"]
