"""Command-line entrypoints that serve the HTTP apps with uvicorn."""

from __future__ import annotations

import argparse

import uvicorn

from string_analyzer.api.api_config import get_api_config


def parse_args(argv: list[str] | None = None, *, default_port: int) -> argparse.Namespace:
    config = get_api_config()
    parser = argparse.ArgumentParser(description="Run the HTTP service")
    parser.add_argument("--host", default=config.host)
    parser.add_argument("--port", type=int, default=default_port)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    return parser.parse_args(argv)


def run_strings_api(argv: list[str] | None = None) -> None:
    args = parse_args(argv, default_port=get_api_config().port)
    uvicorn.run("string_analyzer.api.app:app", host=args.host, port=args.port, reload=args.reload)


def run_profile_api(argv: list[str] | None = None) -> None:
    args = parse_args(argv, default_port=get_api_config().profile_port)
    uvicorn.run(
        "string_analyzer.api.profile_app:app", host=args.host, port=args.port, reload=args.reload
    )


if __name__ == "__main__":
    run_strings_api()
