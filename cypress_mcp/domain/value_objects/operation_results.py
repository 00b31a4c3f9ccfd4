from cypress_mcp.domain.value_objects.camel_model import CamelModel


class GeneratedTest(CamelModel, frozen=True):
    success: bool = True
    test_code: str
    output_path: str | None = None


class OpenInstructions(CamelModel, frozen=True):
    """Returned instead of launching the interactive runner."""

    success: bool = False
    message: str
    command: str
    cwd: str
