from __future__ import annotations

from typing import Callable

import streamlit as st

from services.inventory.client import FetchState, Loading

STATE_KEY = "inventory_fetch_state"


def get_fetch_state() -> FetchState:
    return st.session_state.get(STATE_KEY, Loading())


def ensure_loaded(loader: Callable[[], FetchState]) -> FetchState:
    """
    Run `loader` once per browser session and keep its outcome.
    Streamlit reruns the page on every widget interaction; those reruns read the
    stored state instead of fetching again.
    """
    state = get_fetch_state()
    if isinstance(state, Loading):
        state = loader()
        st.session_state[STATE_KEY] = state
    return state
