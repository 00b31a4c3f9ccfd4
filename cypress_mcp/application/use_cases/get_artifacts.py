from cypress_mcp.application.dto.requests import ArtifactQuery
from cypress_mcp.application.services.invocation_builder import resolve_project_path
from cypress_mcp.domain.services.artifact_filters import ArtifactFilterPolicy, build_matcher
from cypress_mcp.domain.value_objects.app_config import CypressSettings
from cypress_mcp.domain.value_objects.artifact_types import ArtifactKind, ArtifactListing
from cypress_mcp.infrastructure.artifacts.artifact_scanner import (
    SCREENSHOT_PATTERN,
    VIDEO_PATTERN,
    ArtifactScanner,
)


class GetArtifacts:
    """Lists screenshots and videos left in the project by earlier runs."""

    def __init__(self, settings: CypressSettings, scanner: ArtifactScanner | None = None):
        self.settings = settings
        self.scanner = scanner or ArtifactScanner()
        self.screenshot_policy = ArtifactFilterPolicy(settings.screenshot_filter)

    async def screenshots(self, query: ArtifactQuery) -> ArtifactListing:
        project_root = resolve_project_path(query.project, self.settings)
        artifacts = await self.scanner.scan(
            project_root / self.settings.screenshots_folder,
            project_root,
            SCREENSHOT_PATTERN,
            build_matcher(self.screenshot_policy, query.run_id, query.test_path),
        )
        return ArtifactListing(kind=ArtifactKind.SCREENSHOTS, artifacts=artifacts)

    async def videos(self, query: ArtifactQuery) -> ArtifactListing:
        project_root = resolve_project_path(query.project, self.settings)
        artifacts = await self.scanner.scan(
            project_root / self.settings.videos_folder,
            project_root,
            VIDEO_PATTERN,
            # Videos only filter on run id
            build_matcher(ArtifactFilterPolicy.STRICT, query.run_id),
        )
        return ArtifactListing(kind=ArtifactKind.VIDEOS, artifacts=artifacts)
