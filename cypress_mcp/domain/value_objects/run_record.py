from datetime import datetime

from pydantic import Field

from cypress_mcp.domain.value_objects.camel_model import CamelModel

# Maximum number of UTF-8 bytes kept from each of stdout and stderr
OUTPUT_BYTE_BUDGET = 1000


class RunRecord(CamelModel, frozen=True):
    """Outcome of one Cypress invocation, created once when the run ends."""

    run_id: str
    success: bool
    exit_code: int
    stdout: str = Field(description=f"First {OUTPUT_BYTE_BUDGET} bytes of stdout")
    stderr: str = Field(description=f"First {OUTPUT_BYTE_BUDGET} bytes of stderr")
    message: str
    args: list[str] = Field(default_factory=list)
    project_path: str
    spec: str | None = None
    started_at: datetime
    finished_at: datetime
    duration_ms: int
    stdout_bytes: int = 0
    stderr_bytes: int = 0
