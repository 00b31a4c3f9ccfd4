"""Filter policies for artifact scans.

A matcher receives the artifact path relative to the scanned directory and
decides whether the artifact belongs to the caller's query.
"""

from collections.abc import Callable
from enum import Enum

ArtifactMatcher = Callable[[str], bool]


class ArtifactFilterPolicy(str, Enum):
    # Passes whenever either filter is absent or matches
    PERMISSIVE = "permissive"
    # Every supplied filter must match
    STRICT = "strict"


def permissive_match(relative_path: str, run_id: str | None, test_path: str | None) -> bool:
    return (
        not run_id
        or run_id in relative_path
        or not test_path
        or test_path in relative_path
    )


def strict_match(relative_path: str, run_id: str | None, test_path: str | None) -> bool:
    if run_id and run_id not in relative_path:
        return False
    if test_path and test_path not in relative_path:
        return False
    return True


def build_matcher(
    policy: ArtifactFilterPolicy,
    run_id: str | None = None,
    test_path: str | None = None,
) -> ArtifactMatcher:
    match_fn = permissive_match if policy == ArtifactFilterPolicy.PERMISSIVE else strict_match
    return lambda relative_path: match_fn(relative_path, run_id, test_path)
