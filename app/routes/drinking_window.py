"""
/drinking-window endpoints for the Cellar Drinking Window service.

Estimates aging windows, classifies drinking status, and groups a
cellar by status. The evaluation year comes from the request, else
from Config.evaluation_year().
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..config import Config
from ..feature_flags import FeatureFlags, get_feature_flags
from ..models import (
    BucketRequest,
    BucketResponse,
    DrinkingWindowRequest,
    DrinkingWindowResponse,
    StatusDisplayOut,
)
from ..services.status_classifier import (
    STATUS_DISPLAY,
    STATUS_ORDER,
    bucket_by_status,
    format_drinking_window,
    window_info,
)
from ..services.window_estimator import WineAttributes, estimate_window, match_rule

logger = logging.getLogger(__name__)
router = APIRouter()


def _resolve_year(current_year: Optional[int]) -> int:
    return current_year if current_year is not None else Config.evaluation_year()


@router.post("/drinking-window", response_model=DrinkingWindowResponse)
async def get_drinking_window(
    request: DrinkingWindowRequest,
    flags: FeatureFlags = Depends(get_feature_flags),
) -> DrinkingWindowResponse:
    """
    Estimate the drinking window for one wine and classify it.
    """
    year = _resolve_year(request.current_year)
    attrs = WineAttributes(
        vintage=request.wine.vintage,
        grape_variety=request.wine.grape_variety,
        region=request.wine.region,
    )

    window = estimate_window(attrs)
    info = window_info(window, year)

    return DrinkingWindowResponse(
        start=info.start,
        peak=info.peak,
        end=info.end,
        status=info.status,
        status_label=info.status_label,
        status_emoji=info.status_emoji,
        formatted=format_drinking_window(window),
        rule=match_rule(attrs).name if flags.feature_rule_explanations else None,
        current_year=year,
    )


@router.post("/drinking-window/buckets", response_model=BucketResponse)
async def bucket_cellar(
    request: BucketRequest,
    flags: FeatureFlags = Depends(get_feature_flags),
) -> BucketResponse:
    """
    Group cellar wines by drinking status, preserving request order.
    """
    if not flags.feature_status_buckets:
        raise HTTPException(status_code=404, detail="Not found")

    year = _resolve_year(request.current_year)
    buckets = bucket_by_status(
        (
            (wine.id, WineAttributes(wine.vintage, wine.grape_variety, wine.region))
            for wine in request.wines
        ),
        year,
    )

    return BucketResponse(
        current_year=year,
        total=sum(len(ids) for ids in buckets.values()),
        buckets=buckets,
        counts={status: len(ids) for status, ids in buckets.items()},
    )


@router.get("/drinking-window/statuses", response_model=list[StatusDisplayOut])
async def list_statuses() -> list[StatusDisplayOut]:
    """Display labels, emoji and descriptions in listing order."""
    return [
        StatusDisplayOut(
            status=status,
            label=STATUS_DISPLAY[status].label,
            emoji=STATUS_DISPLAY[status].emoji,
            description=STATUS_DISPLAY[status].description,
        )
        for status in STATUS_ORDER
    ]
