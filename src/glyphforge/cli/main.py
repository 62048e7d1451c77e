"""Main CLI entry point for the glyphforge command-line tool.

Provides sub-commands to list styles, style a text in one or every style, run
JSON batches and revert styled text.
"""

import argparse
import json
import random
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from glyphforge import __version__
from glyphforge.api.engine import TextStyler
from glyphforge.api.validation import RequestValidator
from glyphforge.shared.config import ConfigError, EngineConfig
from glyphforge.shared.exceptions import GlyphForgeError
from glyphforge.shared.logging import configure_logging, get_logger

PRESETS = {
    "balanced": EngineConfig.balanced,
    "performance_optimized": EngineConfig.performance_optimized,
}


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self):
        self.engine_config = EngineConfig.balanced()
        self.output_format = "text"

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load CLI configuration from a JSON file.

        The file may name a ``preset``, carry an ``engine`` object in
        :meth:`EngineConfig.to_dict` form, and set ``output_format``.

        Raises:
            ConfigValidationError: If the engine section is invalid
        """
        config = cls()
        try:
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            print(f"Warning: Could not load config file: {e}", file=sys.stderr)
            return config

        if not isinstance(data, dict):
            print("Warning: Config file must hold a JSON object", file=sys.stderr)
            return config

        preset = data.get("preset")
        if preset in PRESETS:
            config.engine_config = PRESETS[preset]()
        elif preset is not None:
            print(f"Warning: Unknown preset: {preset}", file=sys.stderr)

        if "engine" in data:
            config.engine_config = EngineConfig.from_dict(data["engine"])

        config.output_format = data.get("output_format", config.output_format)
        return config


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="glyphforge",
        description="Stylized Unicode text generator with 30+ styles"
    )

    parser.add_argument("--version", action="version", version=__version__)

    # Global options
    parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default=None,
        help="Output format (default: text)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for zalgo randomness, for reproducible output"
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        help="Run batch items on this many worker threads"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("styles", help="List available styles with examples")

    transform_parser = subparsers.add_parser("transform", help="Apply one style")
    transform_parser.add_argument("text", help="Text to transform")
    transform_parser.add_argument(
        "--style", "-s",
        required=True,
        metavar="STYLE",
        help="Style to apply"
    )
    transform_parser.add_argument(
        "--intensity", "-i",
        metavar="INTENSITY",
        help="Zalgo intensity (mini, normal, maxi)"
    )

    all_parser = subparsers.add_parser("all", help="Apply every style")
    all_parser.add_argument("text", help="Text to transform")

    batch_parser = subparsers.add_parser(
        "batch", help="Apply a JSON list of {text, style} items"
    )
    batch_parser.add_argument(
        "file",
        help="JSON file holding the items, or - to read stdin"
    )

    revert_parser = subparsers.add_parser(
        "revert", help="Map styled text back to plain text"
    )
    revert_parser.add_argument("text", help="Styled text")
    revert_parser.add_argument(
        "--style", "-s",
        required=True,
        metavar="STYLE",
        help="Style the text was produced with"
    )

    return parser


def load_config(args: argparse.Namespace) -> CLIConfig:
    """Build the CLI configuration from the config file and flags."""
    config = CLIConfig()
    if args.config:
        config = CLIConfig.from_file(args.config)

    if args.workers:
        config.engine_config = config.engine_config.override(
            performance__enable_parallel_processing=True,
            performance__max_worker_threads=args.workers,
        )

    if args.format:
        config.output_format = args.format
    return config


def build_styler(config: CLIConfig, seed: Optional[int] = None) -> TextStyler:
    rng = random.Random(seed) if seed is not None else None
    return TextStyler(config=config.engine_config, rng=rng)


def format_results(command: str, payload: Dict[str, Any], format_type: str) -> str:
    """Format command results for output."""
    if format_type == "json":
        return json.dumps(payload, indent=2, ensure_ascii=False)

    if command == "styles":
        width = max(len(style["name"]) for style in payload["styles"])
        return "\n".join(
            f"{style['name']:<{width}}  {style['example']}  ({style['description']})"
            for style in payload["styles"]
        )

    if command == "all":
        transformations = payload["transformations"]
        width = max(len(name) for name in transformations)
        return "\n".join(
            f"{name:<{width}}  {value}" for name, value in transformations.items()
        )

    if command == "batch":
        lines = [
            f"Processed {payload['totalItems']} items, "
            f"{payload['successful']} successful",
            "-" * 60,
        ]
        for result in payload["results"]:
            status = "✓" if result["success"] else "✗"
            detail = result["transformed"] if result["success"] else f"Error: {result['error']}"
            lines.append(f"{status} [{result['index']}] {result['style']}: {detail}")
        return "\n".join(lines)

    if command == "transform":
        return payload["transformed"]

    if command == "revert":
        return payload["reverted"]

    return json.dumps(payload, indent=2, ensure_ascii=False)


def cmd_styles(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle styles command."""
    styles = build_styler(config, args.seed).list_styles()
    payload = {
        "totalStyles": len(styles),
        "styles": [info.to_dict() for info in styles],
    }
    print(format_results("styles", payload, config.output_format))
    return 0


def cmd_transform(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle transform command."""
    validator = RequestValidator(config.engine_config.limits)
    request = validator.validate_transform(args.text, args.style, args.intensity)

    styler = build_styler(config, args.seed)
    payload = {
        "original": request.text,
        "style": request.style.value,
        "transformed": styler.transform(request.text, request.style, request.options),
    }
    print(format_results("transform", payload, config.output_format))
    return 0


def cmd_all(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle all command."""
    validator = RequestValidator(config.engine_config.limits)
    text = validator.validate_transform_all(args.text)

    payload = {
        "original": text,
        "transformations": build_styler(config, args.seed).transform_all(text),
    }
    print(format_results("all", payload, config.output_format))
    return 0


def read_batch_items(source: str) -> Any:
    """Read batch items from a JSON file or stdin.

    Accepts either a JSON list of items or an object with an ``items`` list.
    """
    if source == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(source).read_text(encoding="utf-8")

    data = json.loads(raw)
    if isinstance(data, dict) and "items" in data:
        return data["items"]
    return data


def cmd_batch(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle batch command."""
    try:
        raw_items = read_batch_items(args.file)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        print(f"Error reading batch input: {e}", file=sys.stderr)
        return 1

    validator = RequestValidator(config.engine_config.limits)
    items = validator.validate_batch(raw_items)

    result = build_styler(config, args.seed).batch_transform(items)
    print(format_results("batch", result.to_dict(), config.output_format))

    return 0 if result.failed == 0 else 1


def cmd_revert(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle revert command."""
    styler = build_styler(config, args.seed)
    payload = {
        "styled": args.text,
        "style": args.style,
        "reverted": styler.revert(args.text, args.style),
    }
    print(format_results("revert", payload, config.output_format))
    return 0


COMMANDS = {
    "styles": cmd_styles,
    "transform": cmd_transform,
    "all": cmd_all,
    "batch": cmd_batch,
    "revert": cmd_revert,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = get_logger(__name__, None, "cli")

    try:
        config = load_config(args)

        # Set up logging verbosity
        if args.verbose:
            configure_logging("DEBUG")
        elif args.quiet:
            configure_logging("ERROR")
        else:
            configure_logging(config.engine_config.global_.logging_level)

        handler = COMMANDS.get(args.command)
        if handler is None:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 1

        return handler(args, config)

    except (GlyphForgeError, ConfigError) as e:
        logger.debug("Command failed", extra={"command": args.command}, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
