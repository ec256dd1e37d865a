"""
Drinking window estimation for cellar wines.

Maps vintage + grape variety + region to a (start, peak, end) aging curve
using an ordered keyword rule table:
1. First matching rule wins (grape or region keyword, case-insensitive substring)
2. Nothing matched -> default rule (ready now, peak at 2 years, fading by 5)

Rule order is significant. A Cabernet Sauvignon from Bordeaux resolves via the
age-worthy red rule, and a Chardonnay from Burgundy via the Burgundy rule.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WineAttributes:
    """The slice of a wine record the estimator reads.

    vintage must be an integer year; callers reject implausible values
    before they get here.
    """
    vintage: int
    grape_variety: Optional[str] = ""
    region: Optional[str] = ""


@dataclass(frozen=True)
class DrinkingWindow:
    """Earliest-ready, best and last-good years."""
    start: int
    peak: int
    end: int


@dataclass(frozen=True)
class WindowRule:
    """One row of the aging rule table."""
    name: str
    offsets: tuple[int, int, int]  # (years_to_start, years_to_peak, years_to_end)
    grape_keywords: tuple[str, ...] = ()
    region_keywords: tuple[str, ...] = ()

    def matches(self, grape: str, region: str) -> bool:
        """Check lowercased grape/region text against this rule's keywords."""
        return (
            any(keyword in grape for keyword in self.grape_keywords)
            or any(keyword in region for keyword in self.region_keywords)
        )


WINDOW_RULES: tuple[WindowRule, ...] = (
    # Age-worthy reds
    WindowRule(
        name="age_worthy_red",
        offsets=(3, 8, 20),
        grape_keywords=("cabernet", "nebbiolo", "syrah"),
    ),
    WindowRule(
        name="pinot_noir_burgundy",
        offsets=(3, 7, 15),
        grape_keywords=("pinot noir",),
        region_keywords=("burgundy", "bourgogne"),
    ),
    WindowRule(
        name="bordeaux",
        offsets=(5, 10, 25),
        region_keywords=("bordeaux", "médoc", "medoc", "saint-émilion", "saint-emilion"),
    ),
    WindowRule(
        name="barolo_barbaresco",
        offsets=(5, 12, 30),
        region_keywords=("barolo", "barbaresco"),
    ),
    # Whites (most drink young)
    WindowRule(
        name="white",
        offsets=(0, 2, 7),
        grape_keywords=("chardonnay", "sauvignon", "riesling"),
    ),
    # Champagne / sparkling
    WindowRule(
        name="champagne",
        offsets=(0, 5, 15),
        grape_keywords=("champagne",),
        region_keywords=("champagne",),
    ),
)

DEFAULT_RULE = WindowRule(name="default", offsets=(0, 2, 5))


def match_rule(attrs: WineAttributes) -> WindowRule:
    """Return the first rule matching the wine, or DEFAULT_RULE."""
    grape = (attrs.grape_variety or "").lower()
    region = (attrs.region or "").lower()

    for rule in WINDOW_RULES:
        if rule.matches(grape, region):
            logger.debug(f"Rule '{rule.name}' matched grape={grape!r} region={region!r}")
            return rule

    return DEFAULT_RULE


def estimate_window(attrs: WineAttributes) -> DrinkingWindow:
    """Estimate the drinking window for a wine. Never raises."""
    years_to_start, years_to_peak, years_to_end = match_rule(attrs).offsets
    return DrinkingWindow(
        start=attrs.vintage + years_to_start,
        peak=attrs.vintage + years_to_peak,
        end=attrs.vintage + years_to_end,
    )
