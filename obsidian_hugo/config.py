"""Configuration for Obsidian Hugo."""

import shutil
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from obsidian_hugo.core.exporter import Exporter
from obsidian_hugo.core.models import ConfigurationError

ASSETS_DIR_NAME = 'assets'


@dataclass
class ExporterConfig:
    """Settings for one export run."""
    obsidian_dir: Path
    hugo_dir: Path
    hugo_posts_dir: str = "content/posts"
    hugo_assets_dir: str = "content/assets"
    watch: bool = False

    @property
    def asset_source(self) -> Path:
        return Path(self.obsidian_dir) / ASSETS_DIR_NAME

    @property
    def posts_root(self) -> Path:
        return Path(self.hugo_dir) / self.hugo_posts_dir

    @property
    def assets_root(self) -> Path:
        return Path(self.hugo_dir) / self.hugo_assets_dir

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExporterConfig":
        """Build a config from a mapping, rejecting unknown keys.

        Raises:
            ConfigurationError: On unknown keys, missing directories or
                values of the wrong type
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key in ('obsidian_dir', 'hugo_dir'):
            if not data.get(key):
                raise ConfigurationError(f"Missing required setting: {key}")

        for key in ('hugo_posts_dir', 'hugo_assets_dir'):
            if key in data and not (isinstance(data[key], str) and data[key].strip()):
                raise ConfigurationError(f"Setting {key} must be a non-empty path, got {data[key]!r}")

        if 'watch' in data and not isinstance(data['watch'], bool):
            raise ConfigurationError(f"Setting watch must be true or false, got {data['watch']!r}")

        values = dict(data)
        values['obsidian_dir'] = Path(values['obsidian_dir']).expanduser()
        values['hugo_dir'] = Path(values['hugo_dir']).expanduser()
        return cls(**values)

    def resolve(self) -> "ExporterConfig":
        """Return a copy with both roots made absolute.

        Raises:
            ConfigurationError: If either root does not exist
        """
        obsidian_dir = _resolve_dir(self.obsidian_dir, "Obsidian vault dir")
        hugo_dir = _resolve_dir(self.hugo_dir, "Hugo dir")
        return ExporterConfig(
            obsidian_dir=obsidian_dir,
            hugo_dir=hugo_dir,
            hugo_posts_dir=self.hugo_posts_dir,
            hugo_assets_dir=self.hugo_assets_dir,
            watch=self.watch,
        )


def _resolve_dir(path: Path, label: str) -> Path:
    path = Path(path)
    if not path.is_dir():
        raise ConfigurationError(f"Cannot find {label}: {path}")
    return path.resolve()


def load_config(config_path: Path) -> Dict[str, Any]:
    """Load settings from a YAML file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Dict of settings (empty if the file is empty)

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    return data


def prepare_output_dirs(config: ExporterConfig) -> None:
    """Wipe and recreate the posts and assets directories."""
    for directory in (config.posts_root, config.assets_root):
        if directory.exists():
            shutil.rmtree(directory)
        directory.mkdir(parents=True)


def create_exporter_from_config(config: ExporterConfig) -> Exporter:
    """Create an Exporter for the directories named in config.

    Args:
        config: Resolved configuration

    Returns:
        Configured Exporter
    """
    return Exporter(
        source_root=Path(config.obsidian_dir),
        posts_root=config.posts_root,
        asset_source=config.asset_source,
        asset_dest=config.assets_root,
    )
