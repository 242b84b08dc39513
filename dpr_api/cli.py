#!/usr/bin/env python
"""
cli.py

Command-line interface for the members API.

Usage:
  dpr-api serve [--host HOST] [--port PORT] [--reload]
  dpr-api init-db [--database-url URL]
  dpr-api check-db [--database-url URL]
"""

import argparse
import logging
import sys

import uvicorn
from sqlalchemy import func, inspect, select, text

from dpr_api.api.config import settings
from dpr_api.models import AnggotaDPR, create_db_engine, init_db

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)


def serve_command(args) -> int:
    """Start the API server."""
    print(f"Starting server on {args.host}:{args.port} ({settings.ENVIRONMENT})...")
    uvicorn.run(
        "dpr_api.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


def init_db_command(args) -> int:
    """Create the member table and its indexes if they do not exist."""
    engine = create_db_engine(args.database_url)
    try:
        init_db(engine)
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        return 1
    finally:
        engine.dispose()

    print(f"Schema ready at {engine.url.render_as_string(hide_password=True)}")
    return 0


def check_db_command(args) -> int:
    """
    Report connectivity, whether the member table exists and how many rows it holds.
    """
    engine = create_db_engine(args.database_url)
    print("\n=== Database Check ===")
    print(f"URL: {engine.url.render_as_string(hide_password=True)}")
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
            print("Connection: OK")

            table_name = AnggotaDPR.__tablename__
            if not inspect(connection).has_table(table_name):
                print(f"Table {table_name}: missing (run 'dpr-api init-db')")
                return 1

            total = connection.execute(select(func.count()).select_from(AnggotaDPR.__table__)).scalar()
            print(f"Table {table_name}: present")
            print(f"Records: {total}")
    except Exception as e:
        logger.error(f"Database check failed: {e}")
        print("Connection: FAILED")
        return 1
    finally:
        engine.dispose()

    return 0


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description='DPR Members API',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP server')
    serve_parser.add_argument('--host', type=str, default=settings.HOST,
                              help=f'Interface to bind (default: {settings.HOST})')
    serve_parser.add_argument('--port', type=int, default=settings.PORT,
                              help=f'Port to listen on (default: {settings.PORT})')
    serve_parser.add_argument('--reload', action='store_true', help='Enable auto-reload for development')

    for name, help_text in (('init-db', 'Create the member table and indexes'),
                            ('check-db', 'Check connectivity and record count')):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('--database-url', type=str, default=settings.DATABASE_URL,
                         help='SQLAlchemy database URL (default: DATABASE_URL setting)')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == 'serve':
        return serve_command(args)
    elif args.command == 'init-db':
        return init_db_command(args)
    elif args.command == 'check-db':
        return check_db_command(args)
    return 0


if __name__ == '__main__':
    sys.exit(main())
