"""Configuration loader for the NR band tools."""

import yaml
from pathlib import Path
from typing import Any


DEFAULT_CONFIG = {
    "band_hints": [],  # 3GPP band numbers the operator is known to use, e.g. [78, 28]
    "output": "text",  # "text" or "json"
}

OUTPUT_FORMATS = ("text", "json")


def default_config_path() -> Path:
    """XDG location used when no path is given."""
    return Path.home() / ".config" / "nr-band" / "config.yaml"


def _clean_hints(hints: Any) -> list[int]:
    if hints is None:
        return []
    if not isinstance(hints, (list, tuple)):
        hints = [hints]

    cleaned = []
    for hint in hints:
        if isinstance(hint, bool):
            print(f"Warning: Ignoring invalid band hint {hint!r}")
            continue
        try:
            cleaned.append(int(hint))
        except (TypeError, ValueError):
            print(f"Warning: Ignoring invalid band hint {hint!r}")
    return cleaned


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML file with defaults.

    Searches for config in:
    1. Provided path
    2. local/config/config.yaml (user config, gitignored)
    3. ~/.config/nr-band/config.yaml (XDG standard)
    4. Falls back to defaults

    Args:
        config_path: Optional path to config file

    Returns:
        Dict with configuration values
    """
    config = {**DEFAULT_CONFIG, "band_hints": list(DEFAULT_CONFIG["band_hints"])}

    search_paths = []

    if config_path:
        search_paths.append(config_path)

    # Local config (gitignored, stays with repo)
    repo_root = Path(__file__).parent.parent
    search_paths.append(repo_root / "local" / "config" / "config.yaml")

    search_paths.append(default_config_path())

    for path in search_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    user_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                print(f"Warning: Could not load config from {path}: {e}")
                return config

            if isinstance(user_config, dict):
                config.update(user_config)
            elif user_config is not None:
                print(f"Warning: Ignoring config {path}: expected a mapping")
            break

    config["band_hints"] = _clean_hints(config.get("band_hints"))
    if config.get("output") not in OUTPUT_FORMATS:
        print(f"Warning: Unknown output format {config.get('output')!r}, using text")
        config["output"] = "text"

    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration dict to save
        config_path: Optional path to save to (defaults to local/config/config.yaml)
    """
    if config_path is None:
        repo_root = Path(__file__).parent.parent
        config_path = repo_root / "local" / "config" / "config.yaml"

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
