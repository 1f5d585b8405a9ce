"""Configuration loading and management."""

import copy
from pathlib import Path
from typing import Optional

import yaml

from .config_models import WellnessConfig

# Default config dict (written by `wellness init`)
DEFAULT_CONFIG = {
    "supabase": {
        "url": "${SUPABASE_URL}",
        "anon_key": "${SUPABASE_ANON_KEY}",
        "jwt_secret": "${SUPABASE_JWT_SECRET}",
        "timeout": 8.0,
    },
    "user": {"user_id": None, "timezone": "UTC"},
    "analytics": {"default_range": "week", "recent_entries": 10},
    "retry": {"max_attempts": 3, "min_wait": 0.5, "max_wait": 4.0},
    "logging": {"level": "INFO", "json_mode": False},
}


def config_locations() -> list[Path]:
    return [
        Path.cwd() / "config.yaml",
        Path.home() / ".wellness" / "config.yaml",
        Path.home() / "wellness" / "config.yaml",
    ]


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    for loc in config_locations():
        if loc.exists():
            return loc
    return None


def load_config_model(config_path: Optional[Path] = None) -> WellnessConfig:
    """Load configuration as Pydantic model with validation."""
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    try:
        return WellnessConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration as a plain dict."""
    return load_config_model(config_path).to_dict()


def write_default_config(
    path: Path, user_id: Optional[str] = None, timezone: Optional[str] = None
) -> Path:
    config = copy.deepcopy(DEFAULT_CONFIG)
    if user_id:
        config["user"]["user_id"] = user_id
    if timezone:
        config["user"]["timezone"] = timezone

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
    return path
