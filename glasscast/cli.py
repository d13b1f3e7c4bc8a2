"""CLI entry point for the weather widget."""

import argparse
import asyncio
import logging

from glasscast.config.loader import get_config_value, load_config
from glasscast.config.schema import AppConfig
from glasscast.models.errors import WidgetError
from glasscast.models.view import PanelStatus, StatusPanel
from glasscast.pipeline.controller import InteractionController
from glasscast.reporting.formatters import (
    format_view_html,
    format_view_json,
    format_view_text,
)

FORMATTERS = {
    "text": format_view_text,
    "json": format_view_json,
    "html": format_view_html,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="glasscast",
        description="Weather lookup widget",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Look up weather for a city")
    lookup_p.add_argument("city", nargs="?", help="City name (default from config)")
    lookup_p.add_argument("--format", choices=sorted(FORMATTERS), default="text")

    # suggest
    suggest_p = sub.add_parser("suggest", help="List matching places")
    suggest_p.add_argument("query")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    show_p = config_sub.add_parser("show", help="Display effective config")
    show_p.add_argument("key", nargs="?", help="Dotted key, e.g. widget.debounce_ms")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "lookup":
        return asyncio.run(_cmd_lookup(config, args))
    elif args.command == "suggest":
        return asyncio.run(_cmd_suggest(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


async def _cmd_lookup(config: AppConfig, args) -> int:
    if args.city is not None and not args.city.strip():
        print("Error: city name is empty")
        return 1

    controller = InteractionController.from_config(config)
    if args.city is not None:
        controller.submit(args.city)
    else:
        controller.start()
    await controller.wait_idle()
    controller.close()

    view = controller.view.state
    print(FORMATTERS[args.format](view))
    failed = isinstance(view.current, StatusPanel) and view.current.status == PanelStatus.ERROR
    return 1 if failed else 0


async def _cmd_suggest(config: AppConfig, args) -> int:
    controller = InteractionController.from_config(config)
    try:
        locations = await controller.geocoder.suggest(args.query.strip())
    except WidgetError as e:
        print(f"Error: {e}")
        return 1
    if not locations:
        print("No suggestions")
        return 0
    for loc in locations:
        print(f"{loc.label}  [{loc.latitude:.4f}, {loc.longitude:.4f}]")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command != "show":
        print("Use: config show [key]")
        return 1
    if args.key is None:
        print(config.model_dump_json(indent=2))
        return 0
    try:
        value = get_config_value(config, args.key)
    except KeyError as e:
        print(f"Error: {e}")
        return 1
    if hasattr(value, "model_dump_json"):
        print(value.model_dump_json(indent=2))
    else:
        print(value)
    return 0
