from __future__ import annotations

import logging


def configure_logging(level: str = "INFO") -> None:
    """Send ``user_api`` records to stderr at ``level`` (``LOG_LEVEL``).

    Called by ``create_app``; a no-op once the root logger already has handlers.
    """
    logging.basicConfig(
        level=(level or "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
