"""MoodTracker entry point.

Usage:
    python -m moodtracker analyze USER_ID [OPTIONS]

Options:
    --config PATH    Path to YAML config file
    --profile NAME   Profile name (dev, prod, test)
    --dry-run        Load config and exit
    --version        Show version
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pymongo.errors import PyMongoError

from . import __version__
from .analysis import AnalysisError, TaskAnalysisEngine
from .config import MoodTrackerConfig
from .config.loader import load_config
from .config.profiles import detect_profile
from .storage import MongoStorageClient, MongoTaskDataSource


def setup_logging(level: str) -> None:
    """Configure logging based on config."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="moodtracker",
        description="MoodTracker - task mood analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m moodtracker analyze 42                  # Auto-detected profile
  python -m moodtracker analyze 42 --profile prod   # Production profile
  python -m moodtracker analyze 42 --config my.yaml # Custom config file

Environment:
  MOODTRACKER_PROFILE    Set profile (dev, prod, test)
  MONGODB_URI            Override storage.uri
""",
    )

    parser.add_argument("command", choices=["analyze"], help="Command to run")
    parser.add_argument("user_id", type=int, help="User whose tasks are analyzed")

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML config file",
        metavar="PATH",
    )

    parser.add_argument(
        "--profile",
        choices=["dev", "prod", "test"],
        help="Configuration profile to use",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"MoodTracker v{__version__}",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Load config and exit (for testing)",
    )

    return parser.parse_args(argv)


def run_analysis(config: MoodTrackerConfig, user_id: int) -> str:
    """Analyze a user's stored tasks and render the report as JSON.

    Raises:
        PyMongoError: If tasks cannot be retrieved.
        AnalysisError: If strict parsing rejects a task.
    """
    with MongoStorageClient.from_config(config.storage) as storage:
        engine = TaskAnalysisEngine.from_config(
            config.analysis, data_source=MongoTaskDataSource(storage.tasks)
        )
        report = engine.analyze(user_id)

    return json.dumps(report.to_dict(), indent=config.report.indent, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for MoodTracker.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_dotenv()
    args = parse_args(argv)

    try:
        if args.config:
            config = load_config(path=args.config)
        else:
            config = load_config(profile=args.profile or detect_profile().value)
    except FileNotFoundError as e:
        print(f"Error: Config file not found: {e}", file=sys.stderr)
        return 1
    except (TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging.level)
    logger = logging.getLogger("moodtracker")

    logger.info(f"MoodTracker v{__version__}")
    logger.info(f"Log level: {config.logging.level}")

    if args.dry_run:
        logger.info("Dry run mode - exiting after config load")
        logger.info(f"Storage: {config.storage.uri}/{config.storage.database_name}")
        return 0

    try:
        output = run_analysis(config, args.user_id)
    except PyMongoError as e:
        logger.error(f"Failed to retrieve tasks for user {args.user_id}: {e}")
        return 1
    except AnalysisError as e:
        logger.error(f"Analysis failed for user {args.user_id}: {e}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
