from typing import Any

from pydantic import Field

from cypress_mcp.domain.value_objects.browser import Browser
from cypress_mcp.domain.value_objects.camel_model import CamelModel


class RunOptions(CamelModel, frozen=True):
    """Caller-supplied run options. Every field is optional.

    Unset fields fall back to the configured Cypress defaults when the
    invocation is resolved.
    Unknown keys in the argument bag are ignored.
    """

    spec: str | None = Field(default=None, description="Spec file or glob pattern to run")
    browser: Browser | None = Field(default=None, description="Browser to run tests in")
    headless: bool | None = Field(default=None, description="Run in headless mode")
    base_url: str | None = Field(default=None, description="Base URL of the application")
    viewport_width: int | None = None
    viewport_height: int | None = None
    default_command_timeout: int | None = None
    request_timeout: int | None = None
    response_timeout: int | None = None
    env: dict[str, Any] = Field(
        default_factory=dict, description="Environment variables for the Cypress process"
    )
    config: dict[str, Any] = Field(
        default_factory=dict, description="Additional Cypress configuration options"
    )
    project: str | None = Field(default=None, description="Path to the Cypress project")
