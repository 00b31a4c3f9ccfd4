from cypress_mcp.application.dto.requests import (
    ArtifactQuery,
    GenerateRequest,
    ResultsQuery,
    ValidateRequest,
)

__all__ = ["ArtifactQuery", "GenerateRequest", "ResultsQuery", "ValidateRequest"]
