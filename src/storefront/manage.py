"""Storefront management CLI.

Usage:
    storefront setup-db                 # Create all tables (SQL providers only)
    storefront drop-db                  # Drop all tables
    storefront runserver --port 8000    # Serve HTTP and Socket.IO with uvicorn
"""

import argparse

import uvicorn

from storefront.domain import storefront
from storefront.utils.db import drop_db, setup_db


def setup_database():
    """Create the database schema for the storefront domain."""
    print("Initializing storefront domain...")
    storefront.init()
    print("Creating database schema...")
    setup_db(storefront)
    print("Done.")


def drop_database():
    """Drop the database schema for the storefront domain."""
    print("Initializing storefront domain...")
    storefront.init()
    print("Dropping database schema...")
    drop_db(storefront)
    print("Done.")


def run_server(host, port, reload):
    uvicorn.run(
        "storefront.app:create_asgi_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    server_parser = subparsers.add_parser("runserver", help="Run the HTTP and Socket.IO server")
    server_parser.add_argument("--host", default="0.0.0.0")
    server_parser.add_argument("--port", type=int, default=8000)
    server_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "runserver":
        run_server(args.host, args.port, args.reload)


if __name__ == "__main__":
    main()
