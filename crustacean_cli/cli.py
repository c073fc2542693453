"""
Crustacean CLI - Main entry point.

Renders the showcase (or a YAML-declared) diagram to the console, SVG or PNG.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from crustacean_shapes.config import DiagramConfig
from crustacean_shapes.logging import LogEvent, create_logger
from crustacean_shapes.pipeline import PipelineBuilder, default_registry


def load_config(config_path: Optional[str]) -> DiagramConfig:
    """
    Load diagram configuration, or defaults when no path is given.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML is invalid or fails validation
    """
    if config_path is None:
        return DiagramConfig()

    logger = create_logger("cli")
    try:
        config = DiagramConfig.from_yaml(Path(config_path))
    except Exception as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Failed to load config",
            metadata={'path': config_path},
            exc_info=e,
        )
        raise

    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Config loaded",
        metadata={'path': config_path, 'shapes': len(config.shapes)},
    )
    return config


def run(config: DiagramConfig, renderers: List[str], output: Optional[str] = None) -> dict:
    builder = PipelineBuilder().with_config(config)
    if output is not None:
        builder.with_output_folder(output)
    for name in renderers:
        builder.add_renderer(name)
    return builder.build().run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crustacean-cli",
        description="Crustacean CLI - Draw shape diagrams as text, SVG or PNG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Dump drawing commands of the showcase diagram
  crustacean-cli draw

  # Write diagram.svg + diagram.html
  crustacean-cli svg --output ./runs/svg

  # Write diagram.png
  crustacean-cli raster --output ./runs/png

  # Several outputs from a YAML config
  crustacean-cli --config config/diagram.yaml render console svg raster

  # What can I render with?
  crustacean-cli list-renderers
"""
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to diagram config YAML (default: built-in showcase)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('draw', help='Print drawing commands to stdout')

    svg = subparsers.add_parser('svg', help='Write diagram.svg and diagram.html')
    svg.add_argument('--output', default=None, help='Output folder')

    raster = subparsers.add_parser('raster', help='Write diagram.png')
    raster.add_argument('--output', default=None, help='Output folder')

    render = subparsers.add_parser('render', help='Render with several renderers')
    render.add_argument('renderers', nargs='+', help='Renderer names (see list-renderers)')
    render.add_argument('--output', default=None, help='Output folder')

    subparsers.add_parser('list-renderers', help='List available renderers')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == 'list-renderers':
            for name, description in sorted(default_registry().get_help().items()):
                print(f"{name:<10} {description}")
            return 0

        config = load_config(args.config)

        if args.command == 'draw':
            run(config, ['console'])

        elif args.command in ('svg', 'raster'):
            outputs = run(config, [args.command], args.output)
            print(outputs[args.command])

        elif args.command == 'render':
            outputs = run(config, args.renderers, args.output)
            for name, path in outputs.items():
                if path is not None:
                    print(f"{name}: {path}")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
