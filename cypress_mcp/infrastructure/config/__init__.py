from cypress_mcp.infrastructure.config.loader import load_config, resolve_config_path

__all__ = ["load_config", "resolve_config_path"]
