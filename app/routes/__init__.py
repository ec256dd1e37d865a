from .drinking_window import router as drinking_window_router

__all__ = ["drinking_window_router"]
