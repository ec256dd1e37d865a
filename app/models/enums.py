"""
Enums for type-safe string constants in the Cellar Drinking Window service.
"""

from enum import Enum


class DrinkingStatus(str, Enum):
    """Lifecycle of a bottle relative to its drinking window."""
    AGING = "aging"                        # Before the window opens
    READY = "ready"                        # Inside the window, away from peak
    APPROACHING_PEAK = "approaching-peak"  # Within one year of peak
    PAST_PEAK = "past-peak"                # After the window closes
