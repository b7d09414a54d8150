"""
Configuration — Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Environment variables (GTM_DATA_DIR, GTM_COLOR)
  2. Project config (<project>/.gtm/config.yaml)
  3. User config (~/.git-time-metric/config.yaml)
  4. Defaults

Status defaults are OR-ed with command line flags: a flag can switch
an option on, never off.
"""

import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


DATA_DIR_NAME = ".git-time-metric"
CONFIG_FILE = "config.yaml"
PROJECT_CONFIG_DIR = ".gtm"

STATUS_SETTINGS = ("terminal_off", "application_off", "color", "long_duration")


def default_data_dir() -> Path:
    return Path.home() / DATA_DIR_NAME


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).lower() in ('true', '1', 'yes', 'on')


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """A config section, or {} when missing or not a mapping."""
    section = data.get(name)
    return section if isinstance(section, dict) else {}


@dataclass
class DataConfig:
    """Where gtm keeps its project index."""
    dir: Optional[str] = None  # None = ~/.git-time-metric

    @property
    def path(self) -> Path:
        if self.dir:
            return Path(self.dir).expanduser()
        return default_data_dir()


@dataclass
class StatusConfig:
    """Default switches for gtm status."""
    terminal_off: bool = False
    application_off: bool = False
    color: bool = False
    long_duration: bool = False


@dataclass
class Config:
    """Application configuration."""
    data: DataConfig = field(default_factory=DataConfig)
    status: StatusConfig = field(default_factory=StatusConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "data": {
                "dir": self.data.dir
            },
            "status": {name: getattr(self.status, name) for name in STATUS_SETTINGS}
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        data_section = _section(data, "data")
        status_section = _section(data, "status")
        data_dir = data_section.get("dir")

        return cls(
            data=DataConfig(dir=str(data_dir) if data_dir is not None else None),
            status=StatusConfig(**{
                name: _as_bool(status_section.get(name, False)) for name in STATUS_SETTINGS
            })
        )


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment
      2. Project config (.gtm/config.yaml)
      3. User config (~/.git-time-metric/config.yaml)
      4. Defaults
    """

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / PROJECT_CONFIG_DIR / CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return default_data_dir() / CONFIG_FILE

    def _read(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError):
            return {}  # Ignore malformed config
        if not isinstance(data, dict):
            return {}
        # Sections of the wrong shape are ignored like unreadable files
        return {k: v for k, v in data.items() if isinstance(v, dict)}

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read(self.project_config_path))

        # Layer 3: Environment overrides
        if os.environ.get("GTM_DATA_DIR"):
            config_data["data"] = {**_section(config_data, "data"), "dir": os.environ["GTM_DATA_DIR"]}
        if os.environ.get("GTM_COLOR"):
            config_data["status"] = {**_section(config_data, "status"), "color": os.environ["GTM_COLOR"]}

        self._config = Config.from_dict(config_data)
        return self._config

    def save_project(self, config: Config):
        """Save configuration to project config file."""
        self._write(self.project_config_path, config)

    def save_user(self, config: Config):
        """Save configuration to user config file."""
        self._write(self.user_config_path, config)

    def _write(self, path: Path, config: Config):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False)
        self._config = config

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Args:
            key: Dot-separated key (e.g., "status.color")
            value: Value to set
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'status.color')"

        section, setting = parts

        if section == "data":
            if setting == "dir":
                config.data.dir = value or None
            else:
                return f"Unknown data setting: {setting}. Valid: dir"
        elif section == "status":
            if setting in STATUS_SETTINGS:
                setattr(config.status, setting, _as_bool(value))
            else:
                return f"Unknown status setting: {setting}. Valid: {', '.join(STATUS_SETTINGS)}"
        else:
            return f"Unknown section: {section}. Valid: data, status"

        if scope == "project":
            self.save_project(config)
        else:
            self.save_user(config)

        return None

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()

        lines = [
            "Configuration:",
            "",
            "Data:",
            f"  Directory: {config.data.path}",
            "",
            "Status defaults:",
        ]
        for name in STATUS_SETTINGS:
            lines.append(f"  {name}: {str(getattr(config.status, name)).lower()}")
        lines.extend([
            "",
            "Config files:",
            f"  User: {self.user_config_path}",
            f"  Project: {self.project_config_path}",
        ])

        return "\n".join(lines)


# Convenience function
def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
