from .window_estimator import (
    WineAttributes,
    DrinkingWindow,
    WindowRule,
    WINDOW_RULES,
    DEFAULT_RULE,
    estimate_window,
    match_rule,
)
from .status_classifier import (
    DrinkingWindowInfo,
    StatusDisplay,
    STATUS_DISPLAY,
    STATUS_ORDER,
    classify,
    window_info,
    drinking_window_info,
    bucket_by_status,
    format_drinking_window,
)

__all__ = [
    "WineAttributes",
    "DrinkingWindow",
    "WindowRule",
    "WINDOW_RULES",
    "DEFAULT_RULE",
    "estimate_window",
    "match_rule",
    "DrinkingWindowInfo",
    "StatusDisplay",
    "STATUS_DISPLAY",
    "STATUS_ORDER",
    "classify",
    "window_info",
    "drinking_window_info",
    "bucket_by_status",
    "format_drinking_window",
]
