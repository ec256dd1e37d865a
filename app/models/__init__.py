from .enums import DrinkingStatus
from .drinking_window import (
    WineAttributesIn,
    CellarWineIn,
    DrinkingWindowRequest,
    DrinkingWindowResponse,
    BucketRequest,
    BucketResponse,
    StatusDisplayOut,
)

__all__ = [
    "DrinkingStatus",
    "WineAttributesIn",
    "CellarWineIn",
    "DrinkingWindowRequest",
    "DrinkingWindowResponse",
    "BucketRequest",
    "BucketResponse",
    "StatusDisplayOut",
]
