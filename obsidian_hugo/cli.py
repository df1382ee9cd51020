"""Command line interface for Obsidian Hugo."""

import argparse
import sys
from typing import Any, Dict, List, Optional

from obsidian_hugo.config import ExporterConfig, create_exporter_from_config, load_config, prepare_output_dirs
from obsidian_hugo.core.discovery import VaultDiscovery
from obsidian_hugo.core.models import ConfigurationError
from obsidian_hugo.core.watcher import WatchdogEventSource, WatchLoop


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="obsidian-hugo",
        description="Export mds from Obsidian to Hugo",
    )
    parser.add_argument("-o", "--obsidian-dir", help="Obsidian vault dir")
    parser.add_argument("-g", "--hugo-dir", help="Hugo dir")
    parser.add_argument("-p", "--hugo-posts-dir", help="Hugo posts sub dir (default: content/posts)")
    parser.add_argument("-a", "--hugo-assets-dir", help="Hugo assets sub dir (default: content/assets)")
    parser.add_argument("-w", "--watch", action="store_true", default=None, help="Watch the vault and re-export on change")
    parser.add_argument("-c", "--config", help="YAML file with the same settings; flags take precedence")
    return parser


def config_from_args(args: argparse.Namespace) -> ExporterConfig:
    """Merge the optional config file with command line flags.

    Raises:
        ConfigurationError: If settings are missing or invalid
    """
    data: Dict[str, Any] = load_config(args.config) if args.config else {}
    for key in ("obsidian_dir", "hugo_dir", "hugo_posts_dir", "hugo_assets_dir", "watch"):
        value = getattr(args, key)
        if value is not None:
            data[key] = value
    return ExporterConfig.from_dict(data)


def run(config: ExporterConfig) -> None:
    """Export the whole vault, then keep watching if requested."""
    config = config.resolve()
    prepare_output_dirs(config)

    exporter = create_exporter_from_config(config)
    exporter.export_all(VaultDiscovery(config.obsidian_dir))

    if not config.watch:
        return

    print(f"=== \n Watch {config.obsidian_dir} \n===")
    source = WatchdogEventSource(config.obsidian_dir)
    source.start()
    try:
        WatchLoop(exporter, config.obsidian_dir).run(source)
    finally:
        source.stop()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = config_from_args(args)
        run(config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0
