#!/usr/bin/env python3
"""
Cellar Drinking Report CLI

Groups a cellar export by drinking status (ready, at peak, past peak, aging).

Usage:
    python scripts/drinking_report.py cellar.json
    python scripts/drinking_report.py cellar.csv --year 2030
    python scripts/drinking_report.py cellar.json --format json > report.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Load environment variables from .env before any other imports
from dotenv import load_dotenv
load_dotenv()

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import Config
from app.services.cellar_report import CellarFileError, load_cellar, render_json, render_text

logger = logging.getLogger("drinking_report")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Group a cellar export by drinking status")
    parser.add_argument("path", type=Path, help="Cellar export (.json or .csv)")
    parser.add_argument("--year", type=int, default=None,
                        help="Evaluation year (default: EVALUATION_YEAR or current year)")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, Config.log_level(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    year = args.year if args.year is not None else Config.evaluation_year()

    try:
        wines = load_cellar(args.path, year)
    except CellarFileError as e:
        logger.error(str(e))
        return 1

    if args.format == "json":
        print(json.dumps(render_json(wines, year), indent=2, ensure_ascii=False))
    else:
        print(render_text(wines, year))
    return 0


if __name__ == "__main__":
    sys.exit(main())
