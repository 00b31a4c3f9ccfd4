from cypress_mcp.infrastructure.artifacts.artifact_scanner import (
    SCREENSHOT_PATTERN,
    VIDEO_PATTERN,
    ArtifactScanner,
)

__all__ = ["SCREENSHOT_PATTERN", "VIDEO_PATTERN", "ArtifactScanner"]
