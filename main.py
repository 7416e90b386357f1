#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Damage Survey - property damage survey for South Lebanon
Command-line entry point

حصر الأضرار - نقطة الدخول من سطر الأوامر
"""

import argparse
import sys

from app.config import Config
from repositories.kv_store import SQLiteKeyValueStore
from repositories.submission_repository import SubmissionStore
from services.exceptions import EmptyInput, SurveyError
from services.export_service import SurveyExportService
from utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="damage-survey",
        description=f"{Config.APP_TITLE} ({Config.APP_TITLE_AR})"
    )
    parser.add_argument("--db", default=None, help="SQLite store path (default: Config.DB_PATH)")
    parser.add_argument("--log-level", default=None, help="File log level (default: Config.LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Export stored submissions")
    export_parser.add_argument("--format", choices=["xlsx", "csv"], default="xlsx")
    export_parser.add_argument("--output", default=None, help="Output directory")

    subparsers.add_parser("status", help="Show stored submission count")
    return parser


def run_export(store: SubmissionStore, args) -> int:
    service = SurveyExportService(store)
    summary = service.export(format_name=args.format, output_dir=args.output)
    print(summary["message"])
    if summary["skipped_count"]:
        print(f"[WARN] Skipped {summary['skipped_count']} malformed record(s)")
    return 0


def run_status(store: SubmissionStore) -> int:
    print(f"Submissions: {store.count()} / {store.max_submissions}")
    print(f"Remaining: {store.remaining()}")
    print(f"Draft saved: {'yes' if store.has_draft() else 'no'}")
    return 0


def main(argv=None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    # Initialize logging
    try:
        logger = setup_logger(level=args.log_level)
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 2
    logger.info(f"Starting {Config.APP_NAME} v{Config.VERSION}: {args.command}")

    kv_store = SQLiteKeyValueStore(args.db)
    try:
        store = SubmissionStore(kv_store)
        if args.command == "export":
            return run_export(store, args)
        return run_status(store)

    except EmptyInput as e:
        print(f"\n[ERROR] {e}")
        logger.warning(str(e))
        return 1

    except SurveyError as e:
        print(f"\n[ERROR] {e}")
        logger.exception(f"Command failed: {e}")
        return 1

    finally:
        kv_store.close()


if __name__ == "__main__":
    sys.exit(main())
