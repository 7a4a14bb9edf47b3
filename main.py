#!/usr/bin/env python3
"""Home Fur Good: single entry point.

Validates configuration and launches the FastAPI discovery service.

Usage:
    pip install -e .          # once, makes the homefurgood package importable
    python main.py
    python main.py --port 8000
    python main.py --host 127.0.0.1 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger("home-fur-good")


def main() -> None:
    """Check the registry credential, then serve the API."""
    from homefurgood.config import get_config

    config = get_config()

    parser = argparse.ArgumentParser(
        description="Home Fur Good adoptable dog discovery service"
    )
    parser.add_argument(
        "--port", type=int, default=config.port, help="Server port"
    )
    parser.add_argument(
        "--host", type=str, default=config.host, help="Server host"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Root logging level",
    )
    args = parser.parse_args()

    logging.getLogger().setLevel(args.log_level)

    from homefurgood.errors import ConfigurationError

    try:
        config.require_api_key()
    except ConfigurationError as exc:
        logger.error("%s. Set it in your environment or .env file.", exc.message)
        sys.exit(1)

    logger.info("Registry: %s", config.rescuegroups_api_base)
    if config.favorites_url:
        logger.info("Favorite counts: %s", config.favorites_url)

    import uvicorn

    from homefurgood.api.app import create_app

    logger.info("Launching API on %s:%d", args.host, args.port)
    uvicorn.run(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
