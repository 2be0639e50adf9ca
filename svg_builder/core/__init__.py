"""
Core settings shared by the SVG builder models.
This module holds runtime diagnostics settings and a lightweight profiler.
"""

import time
from typing import Any, Dict, Optional

from svg_builder.utils.logger import get_logger

logger = get_logger(__name__)

# Global configuration settings
CONFIG: Dict[str, Any] = {
    # Diagnostics
    "enable_profiling": False,
}

DEFAULT_CONFIG: Dict[str, Any] = dict(CONFIG)


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the core configuration with custom settings.

    Args:
        settings: Dictionary of configuration settings to update

    Raises:
        KeyError: If a setting name is not known
    """
    unknown = sorted(set(settings) - set(CONFIG))
    if unknown:
        raise KeyError(f"Unknown configuration settings: {', '.join(unknown)}")

    CONFIG.update(settings)
    logger.info(f"Core configuration updated: {', '.join(settings.keys())}")


def reset_config() -> None:
    """Restore the default configuration."""
    CONFIG.clear()
    CONFIG.update(DEFAULT_CONFIG)


class Profiler:
    """Simple context manager for timing a block of code."""
    def __init__(self, name: str, enabled: Optional[bool] = None):
        self.name = name
        self.enabled = CONFIG["enable_profiling"] if enabled is None else enabled
        self.start_time = None
        self.duration = None

    def __enter__(self):
        if not self.enabled:
            return self

        self.start_time = time.perf_counter()
        logger.debug(f"Profiling started: {self.name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.enabled or self.start_time is None:
            return

        self.duration = time.perf_counter() - self.start_time
        logger.debug(f"Profiling completed: {self.name} - {self.duration:.6f}s")


__all__ = [
    "CONFIG",
    "DEFAULT_CONFIG",
    "configure",
    "reset_config",
    "Profiler",
]
