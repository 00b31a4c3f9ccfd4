import asyncio
import os
import re
from pathlib import Path

from loguru import logger

from cypress_mcp.domain.services.artifact_filters import ArtifactMatcher
from cypress_mcp.domain.value_objects.artifact_types import ArtifactRecord

SCREENSHOT_PATTERN = re.compile(r"\.(png|jpg|jpeg)$", re.IGNORECASE)
VIDEO_PATTERN = re.compile(r"\.mp4$", re.IGNORECASE)


class ArtifactScanner:
    """Finds screenshot and video files produced by Cypress runs."""

    async def scan(
        self,
        root_dir: Path,
        project_root: Path,
        extension_pattern: re.Pattern[str],
        matcher: ArtifactMatcher,
    ) -> list[ArtifactRecord]:
        """Recursively list files under root_dir accepted by the pattern and
        matcher.

        Args:
            root_dir: Directory to walk. A missing directory yields [].
            project_root: Base for ArtifactRecord.relative_path.
            extension_pattern: Matched case-insensitively against file names.
            matcher: Receives the path relative to root_dir.

        Returns:
            Records in directory walk order.
        """
        return await asyncio.to_thread(
            self._scan_sync, root_dir, project_root, extension_pattern, matcher
        )

    def _scan_sync(
        self,
        root_dir: Path,
        project_root: Path,
        extension_pattern: re.Pattern[str],
        matcher: ArtifactMatcher,
    ) -> list[ArtifactRecord]:
        if not root_dir.is_dir():
            logger.debug("Artifact directory {} does not exist", root_dir)
            return []

        records: list[ArtifactRecord] = []
        for dirpath, dirnames, filenames in os.walk(root_dir):
            dirnames.sort()
            for name in sorted(filenames):
                full_path = Path(dirpath) / name
                if not extension_pattern.search(name) or not full_path.is_file():
                    continue
                if not matcher(full_path.relative_to(root_dir).as_posix()):
                    continue
                records.append(
                    ArtifactRecord(
                        path=str(full_path),
                        relative_path=os.path.relpath(full_path, project_root),
                        size=full_path.stat().st_size,
                    )
                )

        logger.debug("Found {} artifact(s) under {}", len(records), root_dir)
        return records
