"""Argument bags accepted by the non-run commands."""

from pydantic import Field

from cypress_mcp.domain.value_objects.camel_model import CamelModel


class ValidateRequest(CamelModel, frozen=True):
    test_file: str | None = Field(default=None, description="Path to test file to validate")
    test_code: str | None = Field(
        default=None, description="Test code to validate (alternative to testFile)"
    )


class GenerateRequest(CamelModel, frozen=True):
    description: str | None = Field(
        default=None, description="Description of what the test should do"
    )
    test_name: str | None = Field(default=None, description="Name for the test")
    output_path: str | None = Field(
        default=None, description="Path where the generated test file should be saved"
    )


class ResultsQuery(CamelModel, frozen=True):
    run_id: str | None = Field(default=None, description="Run ID to get results for")


class ArtifactQuery(CamelModel, frozen=True):
    run_id: str | None = Field(default=None, description="Run ID to filter artifacts")
    test_path: str | None = Field(
        default=None, description="Test path to filter screenshots"
    )
    project: str | None = Field(default=None, description="Path to Cypress project")
