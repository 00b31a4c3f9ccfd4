"""Turns caller options plus configured defaults into a Cypress command line.

Merging is per field: a caller value wins whenever it is not None, so a
call can override just the browser and keep every other default.
"""

import json
import shlex
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cypress_mcp.domain.value_objects.app_config import CypressSettings
from cypress_mcp.domain.value_objects.run_options import RunOptions

BASE_URL_ENV_VAR = "CYPRESS_BASE_URL"

# RunOptions / CypressSettings field -> Cypress config key passed via --config
CONFIG_KEYS = {
    "viewport_width": "viewportWidth",
    "viewport_height": "viewportHeight",
    "default_command_timeout": "defaultCommandTimeout",
    "request_timeout": "requestTimeout",
    "response_timeout": "responseTimeout",
}


@dataclass(frozen=True)
class RunInvocation:
    argv: list[str]
    args: list[str]
    cwd: Path
    env: dict[str, str] = field(repr=False)
    spec: str | None = None
    base_url: str | None = None


def _pick(option: Any, default: Any) -> Any:
    return option if option is not None else default


def format_env_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _drop_unset(config: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in config.items() if value is not None}


def format_config_arg(config: Mapping[str, Any]) -> str:
    """Render config as the JSON object form of ``--config``."""
    return json.dumps(dict(config), separators=(",", ":"))


def resolve_project_path(options_project: str | None, settings: CypressSettings) -> Path:
    project = options_project or settings.project_path
    return Path(project).expanduser().resolve() if project else Path.cwd()


def executable_argv(settings: CypressSettings) -> list[str]:
    return shlex.split(settings.executable)


def build_run_invocation(
    options: RunOptions,
    settings: CypressSettings,
    environ: Mapping[str, str],
) -> RunInvocation:
    args = ["run"]

    # Only an explicit false turns headless off
    if _pick(options.headless, settings.headless) is not False:
        args.append("--headless")

    browser = _pick(options.browser, settings.browser)
    if browser is not None:
        args.extend(["--browser", browser.value])

    if options.spec:
        args.extend(["--spec", options.spec])

    cypress_config = {
        key: _pick(getattr(options, attr), getattr(settings, attr))
        for attr, key in CONFIG_KEYS.items()
    }
    cypress_config = _drop_unset({**cypress_config, **options.config})
    if cypress_config:
        args.extend(["--config", format_config_arg(cypress_config)])

    base_url = _pick(options.base_url, settings.base_url)

    env = dict(environ)
    env.update({key: format_env_value(value) for key, value in options.env.items()})
    if base_url:
        env[BASE_URL_ENV_VAR] = base_url

    return RunInvocation(
        argv=[*executable_argv(settings), *args],
        args=args,
        cwd=resolve_project_path(options.project, settings),
        env=env,
        spec=options.spec,
        base_url=base_url,
    )


def build_open_command(options: RunOptions, settings: CypressSettings) -> tuple[list[str], Path]:
    """Return the argv a user would run to open the interactive runner, and
    its cwd."""
    argv = [*executable_argv(settings), "open"]

    browser = _pick(options.browser, settings.browser)
    if browser is not None:
        argv.extend(["--browser", browser.value])

    open_config: dict[str, Any] = {}
    base_url = _pick(options.base_url, settings.base_url)
    if base_url:
        open_config["baseUrl"] = base_url
    open_config = _drop_unset({**open_config, **options.config})
    if open_config:
        argv.extend(["--config", format_config_arg(open_config)])

    return argv, resolve_project_path(options.project, settings)
