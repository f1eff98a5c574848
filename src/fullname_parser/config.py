import os
import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "fullname_parser.yml"
CONFIG_ENV_VAR = "FULLNAME_PARSER_CONFIG"

class FNPConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.batch = data.get("batch", {})
        self.logging = data.get("logging", {})
        self.dictionary = data.get("dictionary", {})
        self.debug = data.get("debug", False)

def load_config(path=None) -> 'FNPConfig':
    """
    Load the YAML configuration.

    An explicitly requested file (argument or $FULLNAME_PARSER_CONFIG) must
    exist. The bundled default may be absent (e.g. a wheel install), in which
    case every section is empty.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit) if explicit else CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return FNPConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FNPConfig(data)

_config_cache = None

def get_config() -> 'FNPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache

def reset_config() -> None:
    """Drop the cached config so the next get_config() reloads it."""
    global _config_cache
    _config_cache = None
