"""
Drinking status classification and cellar bucketing.

The evaluation year is always passed in. Nothing here reads the clock,
so results are reproducible across time zones and in tests.
"""

import logging
from dataclasses import dataclass
from typing import Hashable, Iterable, TypeVar

from ..models.enums import DrinkingStatus
from .window_estimator import DrinkingWindow, WineAttributes, estimate_window

logger = logging.getLogger(__name__)

WineId = TypeVar("WineId", bound=Hashable)


@dataclass(frozen=True)
class StatusDisplay:
    """How a status is shown in cellar listings."""
    label: str
    emoji: str
    description: str


@dataclass(frozen=True)
class DrinkingWindowInfo:
    """A drinking window with its status for a given year."""
    start: int
    peak: int
    end: int
    status: DrinkingStatus
    status_label: str
    status_emoji: str


STATUS_DISPLAY: dict[DrinkingStatus, StatusDisplay] = {
    DrinkingStatus.READY: StatusDisplay("Ready Now", "🟢", "Wines in their drinking window"),
    DrinkingStatus.APPROACHING_PEAK: StatusDisplay("At Peak", "🟡", "Wines at or near their peak"),
    DrinkingStatus.PAST_PEAK: StatusDisplay("Past Peak", "🔴", "Wines past their optimal window"),
    DrinkingStatus.AGING: StatusDisplay("Still Aging", "⏳", "Wines that need more time"),
}

# Order used when listing a cellar grouped by status
STATUS_ORDER: tuple[DrinkingStatus, ...] = (
    DrinkingStatus.READY,
    DrinkingStatus.APPROACHING_PEAK,
    DrinkingStatus.PAST_PEAK,
    DrinkingStatus.AGING,
)


def classify(window: DrinkingWindow, current_year: int) -> DrinkingStatus:
    """
    Classify a window against the evaluation year.

    Checks run in order, so a year past `end` is PAST_PEAK even when it
    is also within one year of `peak`.
    """
    if current_year < window.start:
        return DrinkingStatus.AGING
    if current_year > window.end:
        return DrinkingStatus.PAST_PEAK
    if window.peak - 1 <= current_year <= window.peak + 1:
        return DrinkingStatus.APPROACHING_PEAK
    return DrinkingStatus.READY


def window_info(window: DrinkingWindow, current_year: int) -> DrinkingWindowInfo:
    """Classify a window and attach its display label and emoji."""
    status = classify(window, current_year)
    display = STATUS_DISPLAY[status]
    return DrinkingWindowInfo(
        start=window.start,
        peak=window.peak,
        end=window.end,
        status=status,
        status_label=display.label,
        status_emoji=display.emoji,
    )


def drinking_window_info(attrs: WineAttributes, current_year: int) -> DrinkingWindowInfo:
    """Estimate a wine's window and classify it in one call."""
    return window_info(estimate_window(attrs), current_year)


def bucket_by_status(
    wines: Iterable[tuple[WineId, WineAttributes]],
    current_year: int,
) -> dict[DrinkingStatus, list[WineId]]:
    """
    Group wine ids by drinking status.

    Stable partition: every status key is present (possibly empty), each
    group keeps input order, and every wine lands in exactly one group.
    """
    buckets: dict[DrinkingStatus, list[WineId]] = {status: [] for status in STATUS_ORDER}

    for wine_id, attrs in wines:
        status = classify(estimate_window(attrs), current_year)
        buckets[status].append(wine_id)

    logger.info(
        f"Bucketed cellar for {current_year}: "
        + ", ".join(f"{status.value}={len(ids)}" for status, ids in buckets.items())
    )
    return buckets


def format_drinking_window(window: DrinkingWindow) -> str:
    """Render a window as 'start - end'."""
    return f"{window.start} - {window.end}"
