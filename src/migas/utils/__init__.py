"""Utility modules for Migas.

Provides:
- logger: get_logger for logging
- text: whitespace helpers shared by the handlers
"""

from migas.utils.logger import get_logger
from migas.utils.text import collapse_whitespace, text_content

__all__ = [
    "collapse_whitespace",
    "get_logger",
    "text_content",
]
