import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from cypress_mcp.domain.value_objects.app_config import AppConfig, CypressSettings, SecuritySettings
from cypress_mcp.infrastructure.persistence.in_memory_run_store import InMemoryRunStore

StubFactory = Callable[[str], Path]


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def make_stub(tmp_path: Path) -> StubFactory:
    """Write an executable /bin/sh script standing in for the Cypress CLI."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    counter = iter(range(1000))

    def _make(body: str) -> Path:
        script = bin_dir / f"cypress-stub-{next(counter)}"
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def make_config(project_dir: Path) -> Callable[..., AppConfig]:
    def _make(
        executable: str = "cypress",
        allowed_commands: list[str] | None = None,
        **cypress_overrides: object,
    ) -> AppConfig:
        return AppConfig(
            cypress=CypressSettings(
                project_path=str(project_dir),
                executable=executable,
                **cypress_overrides,
            ),
            security=SecuritySettings(
                allowed_commands=["*"] if allowed_commands is None else allowed_commands
            ),
        )

    return _make


@pytest.fixture
def run_store() -> InMemoryRunStore:
    return InMemoryRunStore()
