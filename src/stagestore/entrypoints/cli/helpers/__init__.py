"""CLI helpers for STAGESTORE.

Message emitters that write to stderr with emoji→ASCII fallbacks, and the
``-L NAME=LEVEL`` option parser.
"""

from .log_level_parser import parse_log_level
from .messages import success, warn

__all__ = ["parse_log_level", "success", "warn"]
