"""Summary cards shown above the applications table."""
from __future__ import annotations

from typing import Literal, Sequence

import streamlit as st

from domain.models import ApiResponse

CardIcon = Literal["os", "osquery", "apps"]

ICONS: dict[str, str] = {
    "os": ":material/laptop_mac:",
    "osquery": ":material/database:",
    "apps": ":material/package_2:",
}

UNKNOWN = "Unknown"


def render_system_card(
    title: str,
    icon: CardIcon,
    main_value: str | int,
    details: Sequence[tuple[str, str]] | None = None,
) -> None:
    with st.container(border=True):
        st.metric(label=f"{ICONS[icon]} {title}", value=main_value)
        if icon == "osquery":
            st.markdown(":green[:material/check_circle:] Active and running")
        if icon == "apps":
            st.caption("Total installed applications detected on this system")
        for label, value in details or ():
            left, right = st.columns(2)
            left.caption(label)
            right.markdown(f"`{value}`")


def render_summary_cards(payload: ApiResponse) -> None:
    os_col, osquery_col, apps_col = st.columns(3)
    with os_col:
        render_system_card(
            "Operating System",
            "os",
            payload.os_version.name or UNKNOWN,
            details=[
                ("Version", payload.os_version.version or UNKNOWN),
                ("Platform", payload.os_version.platform or UNKNOWN),
            ],
        )
    with osquery_col:
        render_system_card("Osquery Version", "osquery", payload.osquery_version or UNKNOWN)
    with apps_col:
        render_system_card("Applications", "apps", len(payload.installed_apps))
