"""
SVG Builder - Utilities Package
===============================
This package contains logging and output utilities for the SVG builder.
"""

from svg_builder.utils.logger import (
    setup_logging, get_logger, LogCapture, log_exception
)
from svg_builder.utils.io import is_binary_sink, write_markup



__all__ = [
    'setup_logging', 'get_logger', 'LogCapture', 'log_exception',
    'is_binary_sink', 'write_markup'
]
