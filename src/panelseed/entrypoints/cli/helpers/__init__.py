"""CLI helpers for PANELSEED.

Utilities used by the command-line interface: URL sanitization for safe
display, NAME=LEVEL logger option parsing, and message emitters with
emoji→ASCII fallbacks.
"""

from .db_url import sanitize_url
from .messages import error, info, success, warn

__all__ = ["sanitize_url", "warn", "success", "error", "info"]
