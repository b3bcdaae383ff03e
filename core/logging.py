import logging
import sys

from core.config import settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure logging for the dashboard.
    Call this once at the top of the Streamlit page; reruns are no-ops.
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
