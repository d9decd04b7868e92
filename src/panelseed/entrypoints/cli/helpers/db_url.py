"""Database URL helpers for CLI output.

This module provides `sanitize_url`, which renders a database URL with any
password redacted (as ``***``) so it's safe to show in prompts, logs, or errors.
It uses SQLAlchemy's URL parser and performs no I/O or connectivity checks.

Examples:
    ```bash
    >>> sanitize_url("postgresql+psycopg://panel:s3cr3t@db:5432/panel")
    'postgresql+psycopg://panel:***@db:5432/panel'
    ```

Caveats:
    - Only the URL password field is redacted. Secrets embedded in query
      parameters are not scrubbed.
"""

from sqlalchemy.engine import make_url


def sanitize_url(url: str) -> str:
    """Return ``url`` with its password, if any, replaced by ``***``."""
    return make_url(url).render_as_string(hide_password=True)
