"""
Command-line entry point.

Usage:
    bookapi serve [--host 0.0.0.0] [--port 8000] [--reload]
    bookapi init-db
    bookapi seed
"""

import argparse
import asyncio
import logging

from bookapi.core.config import settings
from bookapi.core.db import dispose_engine, get_session_factory, init_db
from bookapi.infrastructure.books.seed import seed_sample_books
from bookapi.infrastructure.books.sql_book_repository import SqlBookRepository
from bookapi.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API under uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("bookapi.main:app", host=args.host, port=args.port, reload=args.reload)


async def _init_db() -> None:
    try:
        await init_db()
    finally:
        await dispose_engine()


async def _seed() -> int:
    try:
        await init_db()
        return await seed_sample_books(SqlBookRepository(get_session_factory()))
    finally:
        await dispose_engine()


def cmd_init_db(_args: argparse.Namespace) -> None:
    """Create the books table in the configured database."""
    asyncio.run(_init_db())


def cmd_seed(_args: argparse.Namespace) -> None:
    """Insert sample books into an empty database."""
    inserted = asyncio.run(_seed())
    logger.info("Inserted %d books.", inserted)


def main() -> None:
    configure_logging(level=settings.log_level)

    parser = argparse.ArgumentParser(description="Book API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true")
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_parser.set_defaults(func=cmd_init_db)

    seed_parser = subparsers.add_parser("seed", help="Insert sample books")
    seed_parser.set_defaults(func=cmd_seed)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
