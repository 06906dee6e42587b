"""CLI entry point for the ShoreSquad core."""

import argparse
import asyncio
import logging

from shoresquad.app.controller import AppController
from shoresquad.config.loader import (
    config_hash,
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from shoresquad.config.schema import AppConfig
from shoresquad.models.common import Phase
from shoresquad.models.event import ALL_FILTER
from shoresquad.reporting.formatters import (
    format_event_text,
    format_events_text,
    format_forecast_json,
    format_forecast_text,
    format_notification,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="shoresquad",
        description="Beach cleanup events and weather outlook",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Show the weather outlook")
    fc_p.add_argument("--json", action="store_true", help="Print JSON")

    # events
    ev_p = sub.add_parser("events", help="List cleanup events")
    ev_p.add_argument("--filter", default="all", help="Category to show")
    ev_p.add_argument(
        "--more", type=int, default=0, help="Number of extra pages to load"
    )

    # join
    join_p = sub.add_parser("join", help="Join a cleanup event")
    join_p.add_argument("event_id", type=int)
    join_p.add_argument("--times", type=int, default=1, help="Join repeatedly")

    # signup
    signup_p = sub.add_parser("signup", help="Join the squad by email")
    signup_p.add_argument("email")

    # status
    sub.add_parser("status", help="Load everything and show the dashboard")

    # config show / get / set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. weather.primary_region")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "signup":
        return asyncio.run(_cmd_signup(config, args))
    elif args.command == "forecast":
        return asyncio.run(_cmd_forecast(config, args))
    elif args.command == "events":
        return asyncio.run(_cmd_events(config, args))
    elif args.command == "join":
        return asyncio.run(_cmd_join(config, args))
    elif args.command == "status":
        return asyncio.run(_cmd_status(config, args))
    else:
        parser.print_help()
        return 1


async def _cmd_forecast(config: AppConfig, args) -> int:
    app = AppController.from_config(config)
    try:
        ok = await app.refresh_weather()
    finally:
        await app.close()
    if ok and app.forecast is not None:
        if args.json:
            print(format_forecast_json(app.forecast))
        else:
            print(format_forecast_text(app.forecast))
    _print_notifications(app)
    return 0 if ok else 1


async def _cmd_events(config: AppConfig, args) -> int:
    app = AppController.from_config(config)
    try:
        await app.load_events()
        if app.events_phase != Phase.READY:
            _print_notifications(app)
            return 1
        for _ in range(max(0, args.more)):
            await app.load_more()
        view = await app.set_filter(args.filter) or []
    finally:
        await app.close()
    print(_filters_line(app))
    print(format_events_text(view, featured=app.catalog.featured()))
    _print_notifications(app)
    return 0


async def _cmd_join(config: AppConfig, args) -> int:
    app = AppController.from_config(config)
    try:
        await app.load_events()
        event = None
        for _ in range(max(1, args.times)):
            event = await app.join(args.event_id)
    finally:
        await app.close()
    if event is None:
        print(f"Event {args.event_id} is not available")
        return 1
    print(format_event_text(event))
    _print_notifications(app)
    return 0


async def _cmd_signup(config: AppConfig, args) -> int:
    app = AppController.from_config(config)
    try:
        error = await app.signup(args.email)
    finally:
        await app.close()
    if error:
        print(f"Error: {error}")
        return 1
    _print_notifications(app)
    return 0


async def _cmd_status(config: AppConfig, args) -> int:
    app = AppController.from_config(config)
    try:
        await app.init()
    finally:
        await app.close()

    print(f"Weather: {app.weather_phase} | Events: {app.events_phase}")
    if app.forecast is not None:
        print(format_forecast_text(app.forecast))
    print()
    if app.events_phase == Phase.READY:
        print(_filters_line(app))
        print(format_events_text(app.current_view(), featured=app.catalog.featured()))
    _print_notifications(app)
    if Phase.ERROR in (app.weather_phase, app.events_phase):
        return 1
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(f"# config hash: {config_hash(config)}")
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
        except (KeyError, AttributeError):
            print(f"Error: unknown key {args.key}")
            return 1
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        if args.config is None:
            print("Error: --config is required for config set")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key, value)
        except (KeyError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"Set {key} = {get_config_value(new_config, key)}")
        return 0
    else:
        print("Usage: shoresquad config {show|get|set}")
        return 1


def _filters_line(app: AppController) -> str:
    return "Filters: " + ", ".join([ALL_FILTER, *app.catalog.categories()])


def _print_notifications(app: AppController) -> None:
    for n in app.notifications.active():
        print(format_notification(n))
