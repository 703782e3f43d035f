import os
import logging
from pathlib import Path

try:
    import streamlit as st  # type: ignore
    _HAS_STREAMLIT = True
except Exception:
    _HAS_STREAMLIT = False

logger = logging.getLogger(__name__)


def get_secret(name: str, default: str | None = None) -> str | None:
    # Prefer Streamlit secrets if available
    if _HAS_STREAMLIT:
        try:
            if name in st.secrets:
                return str(st.secrets.get(name))
        except Exception:
            # no secrets.toml present
            logger.debug("Streamlit secrets unavailable; reading %s from environment", name)
    return os.environ.get(name, default)


class Settings:
    @property
    def plan_store_path(self) -> str:
        default = str(Path(__file__).parent.parent.parent / ".streamlit" / "plans.json")
        return get_secret("PLAN_STORE_PATH", default) or default

    @property
    def log_level(self) -> str:
        return (get_secret("LOG_LEVEL", "INFO") or "INFO").upper()
