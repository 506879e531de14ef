#!/usr/bin/env python3
"""CLI entrypoint for the provider image service."""

from __future__ import annotations

import json

from cli import DataOptions, InfoOptions, parse_cli
from config import Config, load_config
from core.errors import ImageServiceError
from core.models.image import Provider
from core.providers.adapter import ImageResource
from core.providers.flickr.adapter import FlickrImage
from core.providers.unsplash.adapter import UnsplashImage
from core.services.context import ImageServices, init_services
from logger import get_logger

log = get_logger()


def build_resource(options: InfoOptions | DataOptions, services: ImageServices) -> ImageResource | str:
    """Create the image resource for the CLI options, or return a usage error."""
    if options.provider is Provider.FLICKR:
        if isinstance(options, DataOptions):
            if options.farm is None or not options.server or not options.secret:
                return "Flickr downloads need --farm, --server and --secret."
            return FlickrImage(options.image_id, options.farm, options.server, options.secret, services)
        return FlickrImage(options.image_id, 0, "", "", services)

    urls = None
    if isinstance(options, DataOptions):
        if options.urls_path is None or not options.urls_path.is_file():
            return "Unsplash downloads need --urls-json pointing at the photo's 'urls' object."
        try:
            urls = json.loads(options.urls_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            return f"Invalid JSON in {options.urls_path}: {exc}"
        if isinstance(urls, dict) and isinstance(urls.get("urls"), dict):
            urls = urls["urls"]
    return UnsplashImage(options.image_id, urls, services)


def _print_metadata(resource: ImageResource) -> None:
    info = resource.metadata
    log.info(f"{resource.provider.value}/{resource.identifier}")
    for label, value in (
        ("Title", info.title),
        ("Author", info.author),
        ("Date", info.date),
        ("Description", info.description),
        ("Location", info.location),
    ):
        if value:
            preview = value if len(value) <= 120 else (value[:117] + "...")
            log.info(f"    - {label}: {preview}")


def run(command: str, options: InfoOptions | DataOptions, cfg: Config) -> int:
    """Execute one CLI command against a configured service."""
    services, error = init_services(cfg)
    if error:
        log.error(error)
        return 2
    resource = build_resource(options, services)
    if isinstance(resource, str):
        log.error(resource)
        return 2

    try:
        if command == "info":
            resource.fetch_info()
        else:
            resource.fetch_data(options.size)
    except ImageServiceError as exc:
        log.error(f"  ❌ {command} failed: {exc}")
        return 1

    if isinstance(options, DataOptions):
        data = resource.image_data(options.size) or b""
        if options.out_path:
            options.out_path.parent.mkdir(parents=True, exist_ok=True)
            options.out_path.write_bytes(data)
            log.info(f"Saved {len(data)} bytes to {options.out_path}")
        else:
            log.info(f"Fetched {len(data)} bytes from {resource.image_url(options.size)}")
        return 0
    _print_metadata(resource)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Returns:
        Process exit code.
    """
    command, options = parse_cli(argv)
    if options.config_path:
        if not options.config_path.exists():
            log.error(f"Config path not found: {options.config_path}")
            return 2
        if options.config_path.is_dir():
            log.error(f"Config path must be a file: {options.config_path}")
            return 2

    cfg = load_config(options.config_path)
    log.set_level(options.log_level or cfg.logging.level)
    return run(command, options, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
