"""
main.py
-------
Entry point for the hotel desk terminal.

Responsibilities:
    - Parse the connection arguments (falling back to .env settings).
    - Open the database session, optionally creating the schema.
    - Run the interactive menu and close the connection on the way out.

Usage:
    python main.py [dbname] [port] [user] [--host HOST] [--password PW] [--init-schema]
"""

import argparse
import sys
from typing import Optional, Sequence

import psycopg2

import config
from db.init_db import create_tables
from db.session import Session
from handlers.console import Console
from handlers.menu import run
from utils.logger import get_logger

logger = get_logger(__name__)

GREETING = (
    "\n\n*******************************************************\n"
    "              Hotel Desk User Interface                \n"
    "*******************************************************\n"
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Terminal front end for the hotel booking database.")
    parser.add_argument("dbname", nargs="?", default=config.DB_NAME, help="database name")
    parser.add_argument("port", nargs="?", type=int, default=config.DB_PORT, help="server port")
    parser.add_argument("user", nargs="?", default=config.DB_USER, help="database role")
    parser.add_argument("--host", default=config.DB_HOST, help="server host")
    parser.add_argument("--password", default=config.DB_PASS, help="database password (default: DB_PASS)")
    parser.add_argument("--init-schema", action="store_true",
                        help="create missing tables and the calculate_distance function first")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    """Run the shell. Returns the process exit status."""
    args = parse_args(argv)
    console = console or Console()
    console.say(GREETING)

    # ── 1. Connect ────────────────────────────────────────
    console.say(f"Connecting to postgresql://{args.host}:{args.port}/{args.dbname} ...")
    try:
        session = Session.open(args.host, args.port, args.dbname, args.user, args.password)
    except psycopg2.OperationalError as e:
        print(f"Error - Unable to connect to database: {e}", file=sys.stderr)
        print("Make sure PostgreSQL is running and reachable.", file=sys.stderr)
        return 1
    console.say("Done")

    # ── 2. Shell ──────────────────────────────────────────
    try:
        if args.init_schema:
            create_tables(session.executor)
        run(session, console)
    except EOFError:
        logger.info("Input closed, leaving.")
    finally:
        # ── 3. Cleanup ────────────────────────────────────
        console.say("Disconnecting from database...")
        session.close()
        console.say("Done\n\nBye !")
    return 0


if __name__ == "__main__":
    sys.exit(main())
