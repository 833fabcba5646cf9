import argparse
import asyncio
import logging
import sys
from pathlib import Path

from designkit.adapters.state_file import read_state_file
from designkit.app_shell.config import Settings, configure_logging, get_settings
from designkit.catalog import Catalog, CatalogLoadError, load_catalog, load_default_catalog
from designkit.components.export import (
    ExportInput,
    UnknownFormatError,
    generate_all_exports,
    run_export,
    valid_formats,
)
from designkit.components.resolve import build_config

logger = logging.getLogger("designkit.cli")


def get_catalog(settings: Settings) -> Catalog:
    if settings.catalog_dir is None:
        return load_default_catalog()
    return load_catalog(settings.catalog_dir)


def handle_serve(settings: Settings, args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "designkit.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="debug" if args.verbose else "info",
    )
    return 0


def handle_export(settings: Settings, args: argparse.Namespace) -> int:
    state_path = Path(args.state) if args.state else settings.state_file
    state = read_state_file(state_path)
    if state is None:
        logger.error(
            f"No state at {state_path}. Open DesignKit in the browser and make a selection first."
        )
        return 1

    config = build_config(state, get_catalog(settings))

    if args.all:
        out_dir = Path(args.out or ".")
        out_dir.mkdir(parents=True, exist_ok=True)
        for filename, content in generate_all_exports(config).items():
            (out_dir / filename).write_text(content, encoding="utf-8")
            print(f"Wrote {out_dir / filename}")
        return 0

    try:
        output = run_export(ExportInput(config=config, format=args.format))
    except UnknownFormatError as e:
        logger.error(str(e))
        return 2

    if args.out:
        target = Path(args.out)
        if target.is_dir():
            target = target / output.filename
        target.write_text(output.content, encoding="utf-8")
        print(f"Wrote {target}")
    else:
        sys.stdout.write(output.content)
    return 0


def handle_mcp(settings: Settings, args: argparse.Namespace) -> int:
    from designkit.bridge.client import DesignKitClient
    from designkit.bridge.server import run_server

    client = DesignKitClient(
        args.http_url or settings.http_url,
        settings.state_file,
        timeout=args.timeout,
    )
    asyncio.run(run_server(client))
    return 0


def handle_doctor(settings: Settings, args: argparse.Namespace) -> int:
    from designkit.bridge.client import BackendError, DesignKitClient

    all_passed = True

    try:
        catalog = get_catalog(settings)
        print(f"  Catalog {catalog.version} ({len(catalog)} items) ... ok")
    except CatalogLoadError as e:
        print(f"  Catalog ... FAIL ({e})")
        all_passed = False

    if settings.state_file.exists():
        state = read_state_file(settings.state_file)
        if state is None:
            print(f"  State file {settings.state_file} ... FAIL (unreadable)")
            all_passed = False
        else:
            print(
                f"  State file {settings.state_file} ... ok "
                f"({len(state.selections)} selections)"
            )
    else:
        print(f"  State file {settings.state_file} ... missing (no selections saved yet)")

    http_url = args.http_url or settings.http_url
    with DesignKitClient(http_url, settings.state_file, timeout=args.timeout) as client:
        try:
            client.fetch_export("json")
            print(f"  Backend {http_url} ... ok")
        except BackendError as e:
            print(f"  Backend {http_url} ... not reachable ({e})")

    print("All checks passed." if all_passed else "Some checks failed.")
    return 0 if all_passed else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="designkit", description="DesignKit token engine")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=3000)
    serve_parser.add_argument("--reload", action="store_true")

    # export
    export_parser = subparsers.add_parser("export", help="Export the saved state offline")
    export_parser.add_argument(
        "format", nargs="?", default="json", help=f"One of: {', '.join(valid_formats())}"
    )
    export_parser.add_argument("--state", help="State file (default: the state mirror)")
    export_parser.add_argument("--out", help="Output file or directory (default: stdout)")
    export_parser.add_argument("--all", action="store_true", help="Write every format to --out")

    # mcp / doctor
    for name, help_text in (
        ("mcp", "Run the MCP server on stdio"),
        ("doctor", "Check the state file and backend"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--http-url", help="Backend base URL")
        sub.add_argument("--timeout", type=float, default=5.0)

    return parser


HANDLERS = {
    "serve": handle_serve,
    "export": handle_export,
    "mcp": handle_mcp,
    "doctor": handle_doctor,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # Logs go to stderr; stdout carries exports and the MCP protocol
    configure_logging(args.verbose, stream=sys.stderr)
    return HANDLERS[args.command](get_settings(), args)


if __name__ == "__main__":
    sys.exit(main())
