from dataclasses import dataclass

from cypress_mcp.domain.value_objects.app_config import AppConfig


@dataclass
class CliState:
    config: AppConfig
    debug: bool = False
