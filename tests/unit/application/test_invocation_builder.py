import json
from pathlib import Path

import pytest

from cypress_mcp.application.services.invocation_builder import (
    BASE_URL_ENV_VAR,
    build_open_command,
    build_run_invocation,
    format_config_arg,
    resolve_project_path,
)
from cypress_mcp.domain.value_objects.app_config import CypressSettings
from cypress_mcp.domain.value_objects.browser import Browser
from cypress_mcp.domain.value_objects.run_options import RunOptions

DEFAULT_CONFIG = (
    '{"viewportWidth":1280,"viewportHeight":720,"defaultCommandTimeout":4000,'
    '"requestTimeout":5000,"responseTimeout":30000}'
)


@pytest.fixture
def settings(tmp_path: Path) -> CypressSettings:
    return CypressSettings(project_path=str(tmp_path))


class TestBuildRunInvocation:
    def test_defaults(self, settings: CypressSettings, tmp_path: Path) -> None:
        invocation = build_run_invocation(RunOptions(), settings, {"PATH": "/usr/bin"})

        assert invocation.args == [
            "run",
            "--headless",
            "--browser",
            "chrome",
            "--config",
            DEFAULT_CONFIG,
        ]
        assert invocation.argv == ["cypress", *invocation.args]
        assert invocation.cwd == tmp_path.resolve()
        assert invocation.env == {"PATH": "/usr/bin"}
        assert invocation.spec is None

    def test_caller_overrides_single_field(self, settings: CypressSettings) -> None:
        invocation = build_run_invocation(
            RunOptions(browser=Browser.FIREFOX, spec="cypress/e2e/login.cy.js"),
            settings,
            {},
        )

        assert invocation.args[:6] == [
            "run",
            "--headless",
            "--browser",
            "firefox",
            "--spec",
            "cypress/e2e/login.cy.js",
        ]
        assert invocation.spec == "cypress/e2e/login.cy.js"

    def test_headed_drops_flag(self, settings: CypressSettings) -> None:
        invocation = build_run_invocation(RunOptions(headless=False), settings, {})

        assert "--headless" not in invocation.args

    def test_unset_headless_defaults_to_headless(self, tmp_path: Path) -> None:
        settings = CypressSettings(project_path=str(tmp_path), headless=None)

        invocation = build_run_invocation(RunOptions(), settings, {})

        assert invocation.args[1] == "--headless"

    def test_no_browser_configured(self, tmp_path: Path) -> None:
        settings = CypressSettings(project_path=str(tmp_path), browser=None)

        invocation = build_run_invocation(RunOptions(), settings, {})

        assert "--browser" not in invocation.args

    def test_config_merges_viewport_and_extra_keys(self, settings: CypressSettings) -> None:
        options = RunOptions(viewport_width=800, config={"video": False, "retries": 2})

        invocation = build_run_invocation(options, settings, {})

        config_arg = invocation.args[invocation.args.index("--config") + 1]
        assert json.loads(config_arg) == {
            "viewportWidth": 800,
            "viewportHeight": 720,
            "defaultCommandTimeout": 4000,
            "requestTimeout": 5000,
            "responseTimeout": 30000,
            "video": False,
            "retries": 2,
        }

    def test_nested_config_values_stay_intact(self, settings: CypressSettings) -> None:
        options = RunOptions(
            config={
                "retries": {"runMode": 2, "openMode": 0},
                "excludeSpecPattern": ["a.js", "b.js"],
                "video": None,
            }
        )

        invocation = build_run_invocation(options, settings, {})

        config = json.loads(invocation.args[invocation.args.index("--config") + 1])
        assert config["retries"] == {"runMode": 2, "openMode": 0}
        assert config["excludeSpecPattern"] == ["a.js", "b.js"]
        assert "video" not in config

    def test_none_in_config_drops_key(self, settings: CypressSettings) -> None:
        invocation = build_run_invocation(
            RunOptions(config={"viewportWidth": None}), settings, {}
        )

        config = json.loads(invocation.args[invocation.args.index("--config") + 1])
        assert "viewportWidth" not in config
        assert config["viewportHeight"] == 720

    def test_no_config_flag_when_nothing_to_pass(self, tmp_path: Path) -> None:
        settings = CypressSettings(
            project_path=str(tmp_path),
            viewport_width=None,
            viewport_height=None,
            default_command_timeout=None,
            request_timeout=None,
            response_timeout=None,
        )

        invocation = build_run_invocation(RunOptions(), settings, {})

        assert "--config" not in invocation.args

    def test_env_and_base_url(self, settings: CypressSettings) -> None:
        options = RunOptions(base_url="http://localhost:3000", env={"RETRY": 3, "USER": "ci"})

        invocation = build_run_invocation(options, settings, {"USER": "root", "HOME": "/root"})

        assert invocation.env == {
            "USER": "ci",
            "HOME": "/root",
            "RETRY": "3",
            BASE_URL_ENV_VAR: "http://localhost:3000",
        }
        assert invocation.base_url == "http://localhost:3000"

    def test_non_string_env_values_are_json_encoded(self, settings: CypressSettings) -> None:
        options = RunOptions(env={"DEBUG": True, "RETRIES": 3, "USERS": ["a", "b"]})

        invocation = build_run_invocation(options, settings, {})

        assert invocation.env == {"DEBUG": "true", "RETRIES": "3", "USERS": '["a", "b"]'}

    def test_configured_base_url_used_when_caller_omits_it(self, tmp_path: Path) -> None:
        settings = CypressSettings(project_path=str(tmp_path), base_url="http://app:8080")

        invocation = build_run_invocation(RunOptions(), settings, {})

        assert invocation.env[BASE_URL_ENV_VAR] == "http://app:8080"

    def test_multi_word_executable(self, tmp_path: Path) -> None:
        settings = CypressSettings(project_path=str(tmp_path), executable="npx cypress")

        invocation = build_run_invocation(RunOptions(), settings, {})

        assert invocation.argv[:3] == ["npx", "cypress", "run"]

    def test_project_option_overrides_setting(
        self, settings: CypressSettings, tmp_path: Path
    ) -> None:
        other = tmp_path / "other"

        invocation = build_run_invocation(RunOptions(project=str(other)), settings, {})

        assert invocation.cwd == other.resolve()


class TestBuildOpenCommand:
    def test_open_command(self, settings: CypressSettings, tmp_path: Path) -> None:
        argv, cwd = build_open_command(
            RunOptions(browser=Browser.EDGE, base_url="http://localhost:3000"), settings
        )

        assert argv == [
            "cypress",
            "open",
            "--browser",
            "edge",
            "--config",
            '{"baseUrl":"http://localhost:3000"}',
        ]
        assert cwd == tmp_path.resolve()


class TestHelpers:
    def test_format_config_arg(self) -> None:
        assert format_config_arg({"a": 1, "b": True, "c": "x"}) == '{"a":1,"b":true,"c":"x"}'

    def test_resolve_project_path_falls_back_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        assert resolve_project_path(None, CypressSettings()) == Path.cwd()
