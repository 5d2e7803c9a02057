# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Command-line entry point.

Usage::

    figma-mcp-server --log-level DEBUG
    python -m figma_mcp --log-json

A ``.env`` file in the working directory is loaded first, so
``FIGMA_MCP_LOG_LEVEL`` and ``FIGMA_MCP_LOG_JSON`` can live there.  Flags on
the command line win over the environment.
"""

from __future__ import annotations

import argparse
from functools import partial
import sys
from typing import Sequence

import anyio
from dotenv import load_dotenv

from .app import SERVER_NAME, create_server
from .utils import get_logger, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="figma-mcp-server", description=f"Run the {SERVER_NAME}")
    parser.add_argument("--transport", default="stdio", choices=["stdio"], help="Transport to use")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to FIGMA_MCP_LOG_LEVEL, then INFO)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=None,
        help="Emit one JSON object per log line (defaults to FIGMA_MCP_LOG_JSON)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logger(level=args.log_level, use_json=args.log_json, force=True)
    logger = get_logger("figma_mcp.cli")

    server = create_server()
    try:
        anyio.run(partial(server.serve, transport=args.transport))
    except KeyboardInterrupt:
        logger.info("%s stopped", SERVER_NAME)
    except Exception:
        logger.exception("%s error", SERVER_NAME)
        sys.exit(1)


__all__ = ["build_parser", "main"]
