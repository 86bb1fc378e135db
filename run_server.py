#!/usr/bin/env python
"""
Run the article service HTTP server.
"""
import argparse
from typing import List, Optional

import uvicorn

from article_service.app import create_app
from article_service.config import Config, parse_listen_address
from article_service.in_memory_article_store import InMemoryArticleStore
from article_service.logging_utils import configure_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Tagged article HTTP service")
    parser.add_argument(
        "--addr",
        default=None,
        help="HTTP network address, e.g. ':4000' or '127.0.0.1:8080' (overrides LISTEN_ADDR)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Run the article server."""
    args = parse_args(argv)
    config = Config()

    if args.addr:
        addr = args.addr
        host, port = parse_listen_address(addr)
    else:
        addr = config.listen_addr
        host, port = config.listen_host, config.listen_port

    logger = configure_logging(config.log_level)
    app = create_app(store=InMemoryArticleStore())

    logger.info(f"Starting server on {addr}")

    # uvicorn exits the process if the address cannot be bound
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
