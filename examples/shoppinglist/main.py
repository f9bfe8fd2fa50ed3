"""CLI entry point for the shopping list example.

Usage:
    python -m examples.shoppinglist.main              # Serve on 127.0.0.1:8000
    python -m examples.shoppinglist.main --port 9000
"""

from __future__ import annotations

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="shoppinglist",
        description="Shoppinglist - Collares example web service",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=8000, help="Server port")
    parser.add_argument("--log-level", default="info", help="Logging level")
    args = parser.parse_args(argv)

    import uvicorn

    from examples.shoppinglist.routes import create_app

    logging.basicConfig(level=args.log_level.upper())
    print(f"\nStarting shoppinglist at http://{args.host}:{args.port}/shoppinglist/items")
    print(f"API docs: http://{args.host}:{args.port}/docs\n")
    uvicorn.run(create_app(), host=args.host, port=args.port, log_level=args.log_level)
    return 0


if __name__ == "__main__":
    sys.exit(main())
