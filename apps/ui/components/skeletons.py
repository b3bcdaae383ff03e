import streamlit as st

_BAR = (
    '<div style="height:{h}px;width:100%;border-radius:6px;'
    'background:rgba(151,166,195,0.25);margin-bottom:8px"></div>'
)


def render_card_skeletons() -> None:
    for col in st.columns(3):
        col.markdown(_BAR.format(h=180), unsafe_allow_html=True)


def render_table_skeletons(rows: int = 5) -> None:
    st.markdown(_BAR.format(h=16) * rows, unsafe_allow_html=True)
