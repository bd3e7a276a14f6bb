"""
Day track layout entry point.
Lays out the default events, or a JSON list of events, and prints the result.
"""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Imports
from src.core.config_manager import Config
from src.models import BatchResult
from src.services.track_service import TrackService
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lay out events on a single day track.")
    parser.add_argument("--events", type=Path,
                        help="JSON file holding a list of {start, end, title, location} records")
    parser.add_argument("--legacy-zero-width", action="store_true",
                        help="give conflict-free events a width divisor of 0")
    parser.add_argument("--json", action="store_true", help="print the exported track as JSON")
    parser.add_argument("--output", type=Path, help="also write the exported track to this file")
    return parser.parse_args(argv)


def format_table(result: BatchResult) -> str:
    """Plain text table of the laid-out items."""
    lines = [f"{'id':>3}  {'start':>5}  {'end':>5}  {'col':>3}  {'width':>5}  title"]
    for item in result.items:
        lines.append(
            f"{item.id:>3}  {item.start:>5}  {item.end:>5}  "
            f"{item.column:>3}  {item.width_divisor:>5}  {item.title}"
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args(argv)
    start_time = time.time()

    try:
        if not Config.validate():
            logger.error("Configuration validation failed")
            return 1

        config = Config.load_layout_config()
        if args.legacy_zero_width:
            config.legacy_zero_width = True

        service = TrackService(config)

        if args.events:
            logger.info(f"Loading events from {args.events}")
            with open(args.events, 'r', encoding='utf-8') as f:
                events = json.load(f)
            result = service.create_processor().lay_out_days(events)
        else:
            result = service.lay_out_defaults()

        exported = service.export(result.items)

        if args.json:
            print(json.dumps(exported, indent=2))
        else:
            print(format_table(result))

        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with open(args.output, 'w', encoding='utf-8') as f:
                json.dump(exported, f, indent=2)
            logger.info(f"Layout written to {args.output}")

        for issue in result.errors:
            print(f"Error: {issue}", file=sys.stderr)

        return 0 if result.is_success() else 1

    except FileNotFoundError as e:
        logger.error(f"Could not find: {e.filename}")
        return 1

    except json.JSONDecodeError as e:
        logger.error(f"Events file is not valid JSON: {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Layout interrupted by user")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.debug(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
