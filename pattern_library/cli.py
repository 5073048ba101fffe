#!/usr/bin/env python3
"""
Pattern Library CLI Entry Point

Server modes:
- stdio (default): MCP server for editors and agents
- http: JSON REST API
"""

import argparse
import asyncio
import sys
from dataclasses import replace
from pathlib import Path

from pattern_library import __version__, __package_name__
from pattern_library.config import Config, ConfigManager


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


def build_config(args: argparse.Namespace) -> Config:
    """Environment config with command-line overrides applied."""
    config = ConfigManager().load()
    overrides = {}
    if args.patterns_dir:
        overrides["patterns_dir"] = Path(args.patterns_dir).expanduser().resolve()
    if args.host:
        overrides["http_host"] = args.host
    if args.port:
        overrides["http_port"] = args.port
    if args.log_level:
        overrides["log_level"] = args.log_level
    return replace(config, **overrides) if overrides else config


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pattern-library",
        description="Pattern Library - proven code patterns over MCP and HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  pattern-library                         Run MCP server on stdio (default)
  pattern-library --http                  Run REST API on port 3333
  pattern-library --http --port 8080      Run REST API on port 8080
  pattern-library --patterns-dir ./docs   Serve patterns from ./docs

MCP Configuration (mcp.json):

  {
    "mcpServers": {
      "pattern-library": {
        "command": "pattern-library",
        "args": ["--patterns-dir", "/path/to/patterns"]
      }
    }
  }
"""
    )
    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--stdio",
        action="store_true",
        help="Run MCP server in stdio mode (default)"
    )
    mode.add_argument(
        "--http",
        action="store_true",
        help="Run REST API server"
    )
    parser.add_argument(
        "--patterns-dir", "-d",
        help="Patterns root directory (default: $PATTERNS_DIR or ./patterns)"
    )
    parser.add_argument(
        "--host",
        help="HTTP host (default: $HTTP_HOST or 0.0.0.0)"
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        help="HTTP port (default: $PORT or 3333)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: $LOG_LEVEL)"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = create_parser().parse_args(argv)
    
    if args.version:
        print_version()
        sys.exit(0)
    
    config = build_config(args)
    if not config.patterns_dir.is_dir():
        print(f"Patterns directory not found: {config.patterns_dir}", file=sys.stderr)
        sys.exit(1)
    
    if args.http:
        from pattern_library.server_http import run_http
        asyncio.run(run_http(config))
    else:
        from pattern_library.server import run_stdio
        asyncio.run(run_stdio(config))


if __name__ == "__main__":
    main()
