"""CLI entry point for the forecast widget."""

import argparse
import logging

from forecastwidget.app import build_fetcher, create_app
from forecastwidget.config.loader import get_config_value, load_config
from forecastwidget.models.common import TemperatureUnit
from forecastwidget.view.formatters import format_cards_json, format_cards_text
from forecastwidget.widget.controller import ForecastWidget
from forecastwidget.widget.session import WidgetSession

DEFAULT_CONFIG = "forecastwidget.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="forecastwidget",
        description="Multi-day weather forecast cards",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # cities
    sub.add_parser("cities", help="List configured cities")

    # forecast
    fc_p = sub.add_parser("forecast", help="Fetch and print a city forecast")
    fc_p.add_argument("city", help="City slug")
    fc_p.add_argument(
        "--unit", choices=[u.value for u in TemperatureUnit], default=None,
        help="Temperature unit (default from config)",
    )
    fc_p.add_argument("--json", action="store_true", help="Print JSON")

    # serve
    serve_p = sub.add_parser("serve", help="Run the web widget")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. display.max_days")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "cities":
        return _cmd_cities(config)
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_cities(config) -> int:
    for c in config.cities:
        print(f"{c.slug:<12} {c.name} ({c.latitude}, {c.longitude})")
    return 0


def _cmd_forecast(config, args) -> int:
    city = config.city(args.city)
    if city is None:
        print(f"Error: unknown city '{args.city}'")
        return 1

    unit = TemperatureUnit(args.unit) if args.unit else config.display.default_unit
    widget = ForecastWidget(
        build_fetcher(config),
        session=WidgetSession(unit=unit),
        max_days=config.display.max_days,
    )
    view = widget.select_location(city)
    if view.error_message:
        print(view.error_message)
        return 1

    if args.json:
        print(format_cards_json(city.name, view.cards))
    else:
        print(format_cards_text(city.name, view.cards))
    return 0


def _cmd_serve(config, args) -> int:
    import uvicorn

    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1
