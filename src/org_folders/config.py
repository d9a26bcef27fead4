"""Configuration with directory-based detection.

## .folders/ Folder Specification

```
.folders/
└── config.json          # Main config file
```

### config.json Structure

```json
{
  "data_file": "folders.yaml",
  "default_org_id": "c1556e17-b7c0-45a3-a6ae-9546248fb17a",
  "pagination": {
    "strategy": "cursor",
    "default_limit": 10,
    "max_limit": 100
  },
  "logging": {
    "level": "WARNING"
  }
}
```

A relative ``data_file`` is resolved against the directory holding
``.folders/``.

### Resolution Order

1. Check for .folders/config.json in current directory
2. Walk up parent directories looking for .folders/config.json
3. Fall back to the user config (platformdirs user config dir)
4. Environment variables override whatever was found
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from .paging import DEFAULT_LIMIT, MAX_LIMIT, STRATEGIES

APP_NAME = "org-folders"

# User-level config location
USER_CONFIG_DIR = Path(user_config_dir(APP_NAME))
USER_CONFIG_FILE = USER_CONFIG_DIR / "config.json"

# Directory-level config
CONFIG_DIR = ".folders"
CONFIG_FILE = "config.json"

DEFAULT_DATA_FILE = "folders.yaml"

# Environment overrides
ENV_DATA_FILE = "ORG_FOLDERS_DATA_FILE"
ENV_STRATEGY = "ORG_FOLDERS_STRATEGY"
ENV_LOG_LEVEL = "ORG_FOLDERS_LOG_LEVEL"
ENV_ORG_ID = "ORG_FOLDERS_ORG_ID"


@dataclass
class FoldersConfig:
    """Resolved configuration for a directory."""

    # Source of config
    config_path: Optional[Path] = None
    config_source: str = "none"  # "directory", "parent", "user", "none"

    data_file: Optional[Path] = None
    default_org_id: Optional[str] = None

    # Pagination
    strategy: str = "cursor"
    default_limit: int = DEFAULT_LIMIT
    max_limit: int = MAX_LIMIT

    log_level: str = "WARNING"

    def get_data_file(self) -> Path:
        """Get the folder data file for this config.

        Falls back to folders.yaml in the current directory.
        """
        if self.data_file:
            return self.data_file
        return Path.cwd() / DEFAULT_DATA_FILE

    def to_dict(self) -> dict:
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "config_source": self.config_source,
            "data_file": str(self.get_data_file()),
            "default_org_id": self.default_org_id,
            "strategy": self.strategy,
            "default_limit": self.default_limit,
            "max_limit": self.max_limit,
            "log_level": self.log_level,
        }


def find_config(start_path: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest .folders/config.json by walking up the directory tree.

    Args:
        start_path: Directory to start searching from (default: cwd)

    Returns:
        Path to config.json if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    current = Path(start_path).resolve()

    while True:
        config_path = current / CONFIG_DIR / CONFIG_FILE
        if config_path.exists():
            return config_path
        if current == current.parent:
            return None
        current = current.parent


def load_config_file(config_path: Path) -> dict:
    """Load and parse a config.json file."""
    with open(config_path, encoding="utf-8") as f:
        return json.load(f) or {}


def load_user_config() -> Optional[dict]:
    """Load the user-level config, if present."""
    if USER_CONFIG_FILE.exists():
        return load_config_file(USER_CONFIG_FILE)
    return None


def validate_strategy(strategy: str) -> str:
    strategy = (strategy or "").lower()
    if strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown pagination strategy: {strategy!r}. Use one of: {', '.join(STRATEGIES)}"
        )
    return strategy


def _apply(config: FoldersConfig, data: dict, base_dir: Optional[Path]) -> None:
    if data.get("data_file"):
        data_file = Path(data["data_file"]).expanduser()
        if not data_file.is_absolute() and base_dir is not None:
            data_file = base_dir / data_file
        config.data_file = data_file
    if data.get("default_org_id"):
        config.default_org_id = data["default_org_id"]

    pagination = data.get("pagination", {})
    if "strategy" in pagination:
        config.strategy = validate_strategy(pagination["strategy"])
    if "default_limit" in pagination:
        config.default_limit = int(pagination["default_limit"])
    if "max_limit" in pagination:
        config.max_limit = int(pagination["max_limit"])

    logging_config = data.get("logging", {})
    if "level" in logging_config:
        config.log_level = str(logging_config["level"]).upper()


def resolve_config(path: Optional[Path] = None) -> FoldersConfig:
    """Resolve configuration for a path.

    Args:
        path: Directory to resolve config for (default: cwd)

    Returns:
        FoldersConfig with resolved configuration

    Raises:
        ValueError: If a config names an unknown pagination strategy
    """
    config = FoldersConfig()

    # Step 1: Look for .folders/config.json
    config_path = find_config(path)

    if config_path:
        config.config_path = config_path
        target_dir = Path(path).resolve() if path else Path.cwd().resolve()
        config_dir = config_path.parent.parent  # .folders/config.json -> .folders -> parent
        config.config_source = "directory" if config_dir == target_dir else "parent"
        _apply(config, load_config_file(config_path), config_dir)
    else:
        # Step 2: User config
        user_config = load_user_config()
        if user_config:
            config.config_path = USER_CONFIG_FILE
            config.config_source = "user"
            _apply(config, user_config, None)

    # Step 3: Environment overrides
    if os.environ.get(ENV_DATA_FILE):
        config.data_file = Path(os.environ[ENV_DATA_FILE]).expanduser()
    if os.environ.get(ENV_STRATEGY):
        config.strategy = validate_strategy(os.environ[ENV_STRATEGY])
    if os.environ.get(ENV_LOG_LEVEL):
        config.log_level = os.environ[ENV_LOG_LEVEL].upper()
    if os.environ.get(ENV_ORG_ID):
        config.default_org_id = os.environ[ENV_ORG_ID]

    return config


def create_config(
    path: Path,
    data_file: Optional[str] = None,
    strategy: str = "cursor",
    default_org_id: Optional[str] = None,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> Path:
    """Create a .folders/config.json file in the specified directory.

    Args:
        path: Directory to create .folders/ in
        data_file: Folder data file, relative to ``path`` or absolute
        strategy: Pagination strategy ("cursor" or "offset")
        default_org_id: Organization used when commands omit one
        default_limit: Page size used for non-positive limits
        max_limit: Largest page size served

    Returns:
        Path to created config file
    """
    config_dir = Path(path) / CONFIG_DIR
    config_dir.mkdir(exist_ok=True)

    data = {
        "data_file": data_file or DEFAULT_DATA_FILE,
        "pagination": {
            "strategy": validate_strategy(strategy),
            "default_limit": default_limit,
            "max_limit": max_limit,
        },
    }
    if default_org_id:
        data["default_org_id"] = default_org_id

    config_path = config_dir / CONFIG_FILE
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

    return config_path
