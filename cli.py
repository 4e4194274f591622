"""Command-line interface for browsing the tool catalog and running single dispatches."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config import DispatchConfig, load_dispatch_config, with_timeout
from run import build_dispatcher
from telemetry import DispatchTelemetry
from tools.dispatcher import Dispatcher
from tools.result import Result


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect and invoke backend capability tools")
    parser.add_argument("--config", type=Path, help="Path to TOML config file with backend settings")
    parser.add_argument(
        "--log-level",
        default=os.getenv("DISPATCH_LOG_LEVEL", "WARNING"),
        help="Logging level (default: WARNING, or $DISPATCH_LOG_LEVEL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    catalog = sub.add_parser("catalog", help="List registered tools")
    catalog.add_argument("--json", action="store_true", help="Emit the catalog as JSON")
    catalog.add_argument("--anthropic", action="store_true", help="Emit Anthropic tool definitions as JSON")

    describe = sub.add_parser("describe", help="Print the description of one tool")
    describe.add_argument("tool", help="Tool name, e.g. ConnectApi.GetConnectionById")

    invoke = sub.add_parser("invoke", help="Dispatch one tool call and print the result")
    invoke.add_argument("tool", help="Tool name, e.g. ConnectApi.GetConnectionById")
    args_group = invoke.add_mutually_exclusive_group()
    args_group.add_argument("--args", dest="arguments", help="Arguments as a JSON object")
    args_group.add_argument("--args-file", type=Path, help="File containing the arguments JSON object")
    invoke.add_argument("--timeout", type=float, help="Override every backend timeout (seconds)")
    invoke.add_argument("--stats", action="store_true", help="Print dispatch telemetry to stderr")

    return parser.parse_args(argv)


def _usage_error(message: str) -> NoReturn:
    print(f"error: {message}", file=sys.stderr)
    raise SystemExit(2)


def load_arguments(args: argparse.Namespace) -> Dict[str, Any]:
    raw: Optional[str] = None
    if args.args_file:
        try:
            raw = args.args_file.read_text(encoding="utf-8")
        except OSError as exc:
            _usage_error(f"Cannot read arguments file: {exc}")
    elif args.arguments:
        raw = args.arguments
    if raw is None or not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        _usage_error(f"Arguments are not valid JSON: {exc.msg}")
    if not isinstance(data, dict):
        _usage_error("Arguments must be a JSON object")
    return data


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = _load_config(args.config)
    if args.command == "invoke" and args.timeout is not None:
        if args.timeout <= 0:
            _usage_error("--timeout must be positive")
        config = with_timeout(config, args.timeout)
    telemetry = DispatchTelemetry()
    dispatcher, pool = build_dispatcher(config, telemetry=telemetry)
    console = Console(highlight=False, soft_wrap=True)
    try:
        if args.command == "catalog":
            return _print_catalog(console, dispatcher, as_json=args.json, anthropic=args.anthropic)
        if args.command == "describe":
            return _print_description(console, dispatcher, args.tool)

        arguments = load_arguments(args)
        result = asyncio.run(dispatcher.dispatch(args.tool, arguments))
        print(_result_to_json(result))
        if args.stats:
            print(json.dumps(telemetry.tool_stats(args.tool), indent=2), file=sys.stderr)
        return 0 if result.ok else 1
    finally:
        pool.close()


def _load_config(config_path: Optional[Path]) -> DispatchConfig:
    try:
        return load_dispatch_config(config_path)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Failed to load config {config_path}: {exc}")


def _print_catalog(console: Console, dispatcher: Dispatcher, *, as_json: bool, anthropic: bool) -> int:
    if anthropic:
        print(json.dumps(dispatcher.anthropic_tools(), ensure_ascii=False, indent=2))
        return 0
    catalog = dispatcher.catalog()
    if as_json:
        print(json.dumps([schema.to_dict() for schema in catalog], ensure_ascii=False, indent=2))
        return 0

    table = Table(title=f"{len(catalog)} tools")
    table.add_column("Tool")
    table.add_column("Parameters")
    table.add_column("Result")
    table.add_column("Description")
    for schema in catalog:
        params = ", ".join(
            param.name if param.required else f"[{param.name}]" for param in schema.parameters
        )
        table.add_row(escape(schema.name), escape(params or "-"), schema.result_kind.value, escape(schema.description))
    console.print(table)
    return 0


def _print_description(console: Console, dispatcher: Dispatcher, tool: str) -> int:
    for schema in dispatcher.catalog():
        if schema.name == tool:
            console.print(schema.describe(), markup=False)
            return 0
    print(f"Unknown tool: {tool}", file=sys.stderr)
    return 1


def _result_to_json(result: Result) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)


if __name__ == "__main__":
    raise SystemExit(main())
