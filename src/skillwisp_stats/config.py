"""Configuration loading for skillwisp-stats."""
import tomllib
from pathlib import Path

DEFAULT_CONFIG_NAME = "skillwisp-stats.toml"

DEFAULT_STATS = {
    "skills_dir": "skills",
    "docs": ["README.md", "docs/skills.md"],
    "registry_dir": "../skillwisp-cli/registry",
    "locale": "zh-CN",
    "source_marker": "@",
    "skill_file": "SKILL.md",
}


def load_config(config_path: Path) -> dict:
    """Load config from TOML file, falling back to defaults."""
    config = {"stats": dict(DEFAULT_STATS)}

    if config_path.exists():
        with open(config_path, "rb") as f:
            user_config = tomllib.load(f)
        if "stats" in user_config:
            config["stats"].update(user_config["stats"])

    return config


def resolve_path(root: Path, value: str) -> Path:
    """Resolve a configured path against the repository root."""
    path = Path(value).expanduser()
    return path if path.is_absolute() else (root / path).resolve()
