"""Console client that connects to the backend."""

from __future__ import annotations

import argparse
import logging

DEFAULT_BACKEND = "http://localhost:8080"

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Connect to the backend service.")
    parser.add_argument("--backend", default=DEFAULT_BACKEND, help="backend base URL")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, announce the backend connection and return the exit status."""
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    logger.info("connecting to backend %s", args.backend)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())