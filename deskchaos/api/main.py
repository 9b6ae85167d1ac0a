from __future__ import annotations

import argparse
import logging
import sys

import uvicorn
from dotenv import load_dotenv

from .config_loader import load_config
from .server import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser with minimal CLI flags.

    Most configuration is loaded from config/deskchaos.json.
    CLI flags are only for quick overrides.
    """
    parser = argparse.ArgumentParser(
        description="Run the Desk Chaos Analyzer API server",
        epilog="Configuration is loaded from config/deskchaos.json. "
               "CLI arguments override config file settings."
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/deskchaos.json",
        help="Path to JSON configuration file (default: config/deskchaos.json)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Override server host (default: from config file)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Override server port (default: from config file)"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s"
        )
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ValueError as exc:
        logger.error("Failed to load configuration: %s", exc)
        sys.exit(1)

    if args.host:
        cfg.server.host = args.host
    if args.port:
        cfg.server.port = args.port

    logging.getLogger().setLevel(cfg.server.log_level.upper())
    logger.info("Server configuration: %s:%d", cfg.server.host, cfg.server.port)
    logger.info("Upload size limit: %d bytes", cfg.upload.max_bytes)

    app = create_app(max_upload_bytes=cfg.upload.max_bytes)

    try:
        uvicorn.run(
            app,
            host=cfg.server.host,
            port=cfg.server.port,
            log_level=cfg.server.log_level,
            timeout_graceful_shutdown=1,
        )
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt received during shutdown")


if __name__ == "__main__":
    main()
