"""Typed configuration consumed by the command core.

Field aliases match the camelCase keys of ``cypress-mcp.config.yaml``.
"""

from typing import Literal

from pydantic import Field, field_validator

from cypress_mcp.domain.value_objects.browser import Browser
from cypress_mcp.domain.value_objects.camel_model import CamelModel

WILDCARD = "*"


class CypressSettings(CamelModel):
    project_path: str | None = Field(
        default=None, description="Cypress project root (default: current directory)"
    )
    executable: str = Field(
        default="cypress", description="Command used to start Cypress, e.g. 'npx cypress'"
    )
    browser: Browser | None = Browser.CHROME
    headless: bool | None = True
    base_url: str | None = None
    viewport_width: int | None = 1280
    viewport_height: int | None = 720
    default_command_timeout: int | None = 4000
    request_timeout: int | None = 5000
    response_timeout: int | None = 30000
    screenshots_folder: str = "cypress/screenshots"
    videos_folder: str = "cypress/videos"
    screenshot_filter: Literal["permissive", "strict"] = Field(
        default="permissive", description="Screenshot filter policy: permissive or strict"
    )

    @field_validator("executable")
    @classmethod
    def validate_executable(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("executable must not be empty")
        return v


class ServerSettings(CamelModel):
    name: str = "cypress-mcp-server"
    version: str = "1.0.0"


class SecuritySettings(CamelModel):
    allowed_commands: list[str] = Field(default_factory=lambda: [WILDCARD])
    max_execution_time: int = Field(default=300000, description="Milliseconds")
    enforce_max_execution_time: bool = False


class AppConfig(CamelModel):
    cypress: CypressSettings = Field(default_factory=CypressSettings)
    mcp: ServerSettings = Field(default_factory=ServerSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
