"""
Logging setup shared by every Streamlit page.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once per process.

    Streamlit reruns page scripts on every interaction, so repeated calls
    must not stack handlers.
    """
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    _configured = True
