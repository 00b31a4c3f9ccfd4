from pydantic import Field

from cypress_mcp.domain.value_objects.camel_model import CamelModel


class ValidationReport(CamelModel):
    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
