import streamlit as st

from apps.ui.components.applications_table import render_applications_table
from apps.ui.components.skeletons import render_card_skeletons, render_table_skeletons
from apps.ui.components.system_card import render_summary_cards
from apps.ui.state import ensure_loaded, get_fetch_state
from core.logging import configure_logging
from services.inventory import client as inventory_client
from services.inventory.client import Failed, Loading

st.set_page_config(page_title="System Information Dashboard", layout="wide")
configure_logging()

page = st.empty()


def render_dashboard(cards, table) -> None:
    with page.container():
        st.title("System Information Dashboard")
        st.caption("Displaying data collected from osquery on your local system")
        with st.container():
            cards()
        with st.container(border=True):
            st.subheader("Installed Applications")
            st.caption("Applications installed on this system as reported by osquery")
            table()


if isinstance(get_fetch_state(), Loading):
    render_dashboard(render_card_skeletons, render_table_skeletons)

state = ensure_loaded(inventory_client.load_dashboard_state)

if isinstance(state, Failed):
    page.error(f"**Error**\n\nFailed to fetch system data: {state.message}", icon=":material/error:")
else:
    payload = state.payload
    render_dashboard(
        lambda: render_summary_cards(payload),
        lambda: render_applications_table(payload.installed_apps),
    )
    if payload.last_updated:
        st.caption(f"Last updated: {payload.last_updated}")
