# ui_components.py
from __future__ import annotations

import os
import streamlit as st
from typing import Callable, Iterable, Sequence, Tuple


def step_chips(labels: Sequence[str], active: int, done: Iterable[int], on_click: Callable[[int], None]):
    """Row of numbered step buttons; clicking one jumps straight to that step."""
    done = set(done)
    cols = st.columns(len(labels))
    for i, (col, label) in enumerate(zip(cols, labels)):
        mark = "✓ " if i in done and i != active else ""
        with col:
            st.button(
                f"{i + 1}. {mark}{label}",
                key=f"chip_{i}",
                type="primary" if i == active else "secondary",
                on_click=on_click,
                args=(i,),
                width="stretch",
            )


def resolve_icon(icon: str | None, icon_dir: str) -> str | None:
    """Full path of an option icon, or None when the kiosk did not supply the file."""
    if not icon:
        return None
    path = os.path.join(icon_dir, icon)
    return path if os.path.isfile(path) else None


def option_card(label: str, icon: str | None, selected: bool, on_click: Callable, key: str, args: tuple = ()):
    """Selectable answer card; *icon* is an already resolved path or None."""
    with st.container(border=True):
        if icon:
            st.image(icon, width=56)
        st.button(
            label,
            key=key,
            type="primary" if selected else "secondary",
            on_click=on_click,
            args=args,
            width="stretch",
        )


def option_grid(options: Sequence[Tuple[str, str, str | None]], selected: str | None, on_pick: Callable[[str], None], key_prefix: str, columns: int = 2):
    """options: (option id, label, icon)."""
    cols = st.columns(columns)
    for i, (oid, label, icon) in enumerate(options):
        with cols[i % columns]:
            option_card(label, icon, oid == selected, on_pick, key=f"{key_prefix}_{oid}", args=(oid,))


def interstitial(title: str, body: str, on_close: Callable):
    with st.container(border=True):
        st.subheader(title)
        st.write(body)
        st.button("OK", key="interstitial_ok", type="primary", on_click=on_close)


def pill(title: str, body: str):
    with st.container(border=True):
        st.markdown(f"**{title}**")
        st.caption(body)


def metric_row(items: Sequence[Tuple[str, str]], columns: int = 2):
    """Lays (label, value) metrics out left to right, wrapping every *columns* items."""
    if not items:
        return
    cols = st.columns(min(columns, len(items)))
    for i, (label, value) in enumerate(items):
        with cols[i % len(cols)]:
            st.metric(label, value)
