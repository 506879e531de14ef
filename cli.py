"""Command-line parsing helpers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from core.models.image import Provider, SizeVariant

LOG_LEVEL_CHOICES = ("debug", "info", "warn", "error")


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to a config.json file")
    parser.add_argument("--log-level", choices=LOG_LEVEL_CHOICES, help="Override the configured log level")
    parser.add_argument("provider", choices=[p.value for p in Provider], help="Image provider")
    parser.add_argument("image_id", help="Provider photo id")


@dataclass
class InfoOptions:
    """Parsed CLI options for the info command."""

    provider: Provider
    image_id: str
    config_path: Path | None
    log_level: str | None


@dataclass
class DataOptions:
    """Parsed CLI options for the data command."""

    provider: Provider
    image_id: str
    config_path: Path | None
    log_level: str | None
    size: SizeVariant
    out_path: Path | None
    farm: int | None
    server: str | None
    secret: str | None
    urls_path: Path | None


def _size_arg(value: str) -> SizeVariant:
    try:
        return SizeVariant.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch Flickr and Unsplash images and metadata.")
    commands = parser.add_subparsers(dest="command", required=True)

    info = commands.add_parser("info", help="Fetch normalized metadata for an image")
    _add_common_args(info)

    data = commands.add_parser("data", help="Download an image at one size")
    _add_common_args(data)
    data.add_argument(
        "--size",
        type=_size_arg,
        default=SizeVariant.ORIGINAL.value,
        help="thumbnail, small, medium, large, extra_large or original (default: original)",
    )
    data.add_argument("--out", help="Write the image bytes to this path")
    data.add_argument("--farm", type=int, help="Flickr farm number")
    data.add_argument("--server", help="Flickr server id")
    data.add_argument("--secret", help="Flickr photo secret")
    data.add_argument("--urls-json", help="JSON file holding the Unsplash 'urls' object of the photo")
    return parser


def _resolve_path(value: str | None) -> Path | None:
    if not value:
        return None
    return Path(value).expanduser().resolve()


def resolve_config_path(value: str | None) -> Path | None:
    """Resolve the config path, falling back to ./config.json when present."""
    if value:
        return _resolve_path(value)
    default_file = Path.cwd() / "config.json"
    if default_file.exists():
        return default_file.resolve()
    return None


def parse_cli(argv: list[str] | None = None) -> tuple[str, InfoOptions | DataOptions]:
    """Parse command-line arguments and return the command name and options."""
    args = _build_parser().parse_args(argv)
    provider = Provider(args.provider)
    config_path = resolve_config_path(args.config)
    if args.command == "info":
        return "info", InfoOptions(
            provider=provider,
            image_id=args.image_id,
            config_path=config_path,
            log_level=args.log_level,
        )
    return "data", DataOptions(
        provider=provider,
        image_id=args.image_id,
        config_path=config_path,
        log_level=args.log_level,
        size=args.size,
        out_path=_resolve_path(args.out),
        farm=args.farm,
        server=args.server,
        secret=args.secret,
        urls_path=_resolve_path(args.urls_json),
    )
