from enum import Enum

from cypress_mcp.domain.value_objects.camel_model import CamelModel


class ArtifactKind(str, Enum):
    SCREENSHOTS = "screenshots"
    VIDEOS = "videos"


class ArtifactRecord(CamelModel, frozen=True):
    path: str
    relative_path: str
    size: int


class ArtifactListing(CamelModel, frozen=True):
    kind: ArtifactKind
    artifacts: list[ArtifactRecord]

    def to_payload(self) -> dict[str, object]:
        """Render as ``{"screenshots": [...]}`` or ``{"videos": [...]}``."""
        return {self.kind.value: [a.to_payload() for a in self.artifacts]}
