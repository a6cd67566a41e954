#!/usr/bin/env python3
"""
restservice Server Entry Point

This is the main entry point for starting the REST key-value service.

Usage:
    python -m restservice.server                 # Port from REST_PORT (default 8000)
    python -m restservice.server --debug         # Enable debug logging
    python -m restservice.server --addr 127.0.0.1:8000

Environment Variables:
    REST_PORT           - Port to listen on (default 8000)
    REST_HOST           - Bind address used when --addr has no host part
    REST_MAX_BODY_SIZE  - Largest accepted request body in bytes
    REST_DEBUG          - Enable debug mode (true/false)
    REST_LOG_LEVEL      - Log level when not in debug mode

The REST_PORT value wins over the port given with --addr.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Tuple

from .config.settings import resolve_port, settings
from .network.http_server import RestServer
from .store.store import KeyValueStore


def parse_args(argv: Optional[List[str]] = None, default_addr: str = ":8000") -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="restservice: In-Memory REST Key-Value Service",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--addr",
        type=str,
        default=default_addr,
        help="http service address",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def split_addr(addr: str) -> Tuple[str, str]:
    """
    Split a "host:port" address.

    Examples:
        >>> split_addr(":8000")
        ('', '8000')
        >>> split_addr("127.0.0.1:9000")
        ('127.0.0.1', '9000')
    """
    host, _, port = addr.rpartition(":")
    return host.strip("[]"), port


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else settings.LOG_LEVEL.upper()

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the server."""
    try:
        port = resolve_port()
    except ValueError as e:
        setup_logging()
        logging.getLogger(__name__).critical(f"ListenAndServe: {e}")
        sys.exit(1)
    print(f"REST service started using port: {port}...")

    args = parse_args(argv, default_addr=f":{port}")

    # Setup logging
    settings.DEBUG = args.debug
    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    host, addr_port = split_addr(args.addr)
    if addr_port != str(port):
        logger.warning(f"Ignoring port {addr_port!r} from --addr, REST_PORT selects port {port}")
    host = host or settings.HOST

    store = KeyValueStore()
    server = RestServer(host=host, port=port, store=store)

    try:
        server.bind()
    except OSError as e:
        # Bind/listen failures are fatal
        logger.critical(f"ListenAndServe: {e}")
        sys.exit(1)

    # Log startup info
    logger.info("Starting REST service")
    logger.info(f"  Host: {host}")
    logger.info(f"  Port: {port}")
    logger.info(f"  Debug: {args.debug}")

    # SIGINT/SIGTERM are handled by uvicorn's graceful shutdown
    try:
        asyncio.run(server.start())
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
    finally:
        logger.info("Server shutdown complete")


if __name__ == "__main__":
    main()
