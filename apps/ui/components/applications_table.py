"""Tabbed table of installed applications (all / recently used / deleted)."""
from __future__ import annotations

from typing import Any, Sequence

import pandas as pd
import streamlit as st

from domain.models import InstalledApp
from services.inventory.views import (
    all_rows,
    deleted_apps,
    deleted_rows,
    has_recent_activity,
    recent_rows,
)

TAB_LABELS = ("All Applications", "Recently Used", "Deleted Apps")

EMPTY_MESSAGES = {
    "all": "There are no applications installed on this system.",
    "recent": "No applications have been opened recently.",
    "deleted": "There are no deleted applications to display.",
}


def render_empty_state(message: str) -> None:
    st.info(f"**No Applications Found**\n\n{message}", icon=":material/package_2:")


def _render_rows(rows: list[dict[str, Any]]) -> None:
    st.dataframe(pd.DataFrame(rows), hide_index=True)


def render_applications_table(apps: Sequence[InstalledApp]) -> None:
    apps = list(apps)
    all_tab, recent_tab, deleted_tab = st.tabs(TAB_LABELS)

    with all_tab:
        if not apps:
            render_empty_state(EMPTY_MESSAGES["all"])
        else:
            _render_rows(all_rows(apps))

    with recent_tab:
        if not has_recent_activity(apps):
            render_empty_state(EMPTY_MESSAGES["recent"])
        else:
            _render_rows(recent_rows(apps))

    with deleted_tab:
        if not deleted_apps(apps):
            render_empty_state(EMPTY_MESSAGES["deleted"])
        else:
            _render_rows(deleted_rows(apps))
