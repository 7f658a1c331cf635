import argparse
import os
from pathlib import Path
from typing import Sequence

import uvicorn


def build_parser() -> argparse.ArgumentParser:
    # -h is taken by --host, so help is long-form only
    parser = argparse.ArgumentParser(description="Run the inventory service", add_help=False)
    parser.add_argument("-h", "--host", required=True, help="Server host")
    parser.add_argument("-p", "--port", type=int, required=True, help="Server port")
    parser.add_argument("-c", "--cache", required=True, help="Cache directory path for uploaded photos")
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    Path(args.cache).mkdir(parents=True, exist_ok=True)

    os.environ["SERVER_HOST"] = args.host
    os.environ["SERVER_PORT"] = str(args.port)
    os.environ["CACHE_DIR"] = args.cache

    uvicorn.run(
        "inventory_service.main:build_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
