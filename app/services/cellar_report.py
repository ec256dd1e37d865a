"""
Cellar drinking report.

Loads wine records exported from the cellar store (JSON or CSV) and
renders them grouped by drinking status. Accepts both camelCase
(grapeVariety) and snake_case (grape_variety) field names.
"""

import csv
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..config import Config
from ..models.enums import DrinkingStatus
from .status_classifier import (
    STATUS_DISPLAY,
    STATUS_ORDER,
    bucket_by_status,
    drinking_window_info,
    format_drinking_window,
)
from .window_estimator import WineAttributes

logger = logging.getLogger(__name__)


class CellarFileError(Exception):
    """Raised when a cellar export cannot be read."""


@dataclass
class CellarWine:
    """A wine record as exported from the cellar."""
    id: str
    name: str
    vintage: int
    grape_variety: str = ""
    region: str = ""
    winery: str = ""

    @property
    def attributes(self) -> WineAttributes:
        return WineAttributes(self.vintage, self.grape_variety, self.region)


def _field(record: dict[str, Any], *names: str) -> Any:
    for name in names:
        value = record.get(name)
        if value not in (None, ""):
            return value
    return None


def _parse_vintage(value: Any) -> Optional[int]:
    """Integer vintage from a JSON number or CSV string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_wine(record: dict[str, Any], index: int, current_year: int) -> Optional[CellarWine]:
    """
    Build a CellarWine from a raw record.

    Returns None if the vintage is missing, not an integer, or outside
    Config.MIN_VINTAGE..Config.max_vintage(current_year).
    """
    vintage = _parse_vintage(_field(record, "vintage"))
    raw_id = _field(record, "id", "wine_id", "wineId")
    wine_id = str(raw_id if raw_id is not None else index + 1)
    if vintage is None:
        logger.warning(f"Skipping wine {wine_id}: missing or invalid vintage {record.get('vintage')!r}")
        return None
    if not Config.MIN_VINTAGE <= vintage <= Config.max_vintage(current_year):
        logger.warning(
            f"Skipping wine {wine_id}: vintage {vintage} outside "
            f"{Config.MIN_VINTAGE}-{Config.max_vintage(current_year)}"
        )
        return None

    return CellarWine(
        id=wine_id,
        name=str(_field(record, "name") or ""),
        vintage=vintage,
        grape_variety=str(_field(record, "grapeVariety", "grape_variety", "varietal") or ""),
        region=str(_field(record, "region") or ""),
        winery=str(_field(record, "winery") or ""),
    )


def load_cellar(path: Path, current_year: int) -> list[CellarWine]:
    """
    Load wines from a .json or .csv export.

    JSON may be a list of records or an object with a "wines" list.
    Spreadsheet exports with a UTF-8 byte order mark are accepted.
    Raises CellarFileError if the file is missing or malformed.
    """
    try:
        if path.suffix.lower() == ".csv":
            with open(path, newline="", encoding="utf-8-sig") as f:
                records = list(csv.DictReader(f))
        else:
            with open(path, encoding="utf-8-sig") as f:
                data = json.load(f)
            if isinstance(data, dict):
                if "wines" not in data:
                    raise CellarFileError(f"Cannot read cellar file {path}: missing 'wines' list")
                records = data["wines"]
            else:
                records = data
    except (OSError, json.JSONDecodeError, csv.Error, UnicodeDecodeError) as e:
        raise CellarFileError(f"Cannot read cellar file {path}: {e}") from e

    if not isinstance(records, list):
        raise CellarFileError(f"Cannot read cellar file {path}: expected a list of wines")

    wines = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(f"Skipping record {index + 1}: not an object")
            continue
        wine = parse_wine(record, index, current_year)
        if wine is not None:
            wines.append(wine)

    logger.info(f"Loaded {len(wines)} of {len(records)} wines from {path}")
    return wines


def group_cellar(wines: list[CellarWine], current_year: int) -> dict[DrinkingStatus, list[CellarWine]]:
    """Group wines by status, keeping input order within each group."""
    buckets = bucket_by_status(((index, wine.attributes) for index, wine in enumerate(wines)), current_year)
    return {status: [wines[index] for index in indexes] for status, indexes in buckets.items()}


def render_text(wines: list[CellarWine], current_year: int) -> str:
    """Plain-text report, one section per non-empty status."""
    if not wines:
        return "Add wines to see drinking recommendations"

    groups = group_cellar(wines, current_year)
    lines = [f"Drinking windows for {current_year}"]
    for status in STATUS_ORDER:
        group = groups[status]
        if not group:
            continue
        display = STATUS_DISPLAY[status]
        lines.append("")
        lines.append(f"{display.emoji} {display.label} ({len(group)})")
        for wine in group:
            info = drinking_window_info(wine.attributes, current_year)
            title = f"{wine.vintage} {wine.name}".strip()
            line = f"  {title}: {format_drinking_window(info)}"
            if status == DrinkingStatus.APPROACHING_PEAK:
                line += f" (Peak: {info.peak})"
            lines.append(line)
    return "\n".join(lines)


def render_json(wines: list[CellarWine], current_year: int) -> dict[str, Any]:
    """JSON-serializable report with per-wine windows."""
    groups = group_cellar(wines, current_year)
    buckets: dict[str, list[dict[str, Any]]] = {}
    for status in STATUS_ORDER:
        entries = []
        for wine in groups[status]:
            info = drinking_window_info(wine.attributes, current_year)
            entries.append({
                "id": wine.id,
                "name": wine.name,
                "vintage": wine.vintage,
                "start": info.start,
                "peak": info.peak,
                "end": info.end,
            })
        buckets[status.value] = entries

    return {
        "current_year": current_year,
        "total": len(wines),
        "buckets": buckets,
    }
