"""Custom CSS for the billing dashboard."""

from __future__ import annotations

import streamlit as st

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------
_BLUE_PRIMARY = "#1d4ed8"
_SLATE_DARK = "#0f172a"
_SLATE_MUTED = "#64748b"
_SLATE_BG = "#f8fafc"
_BORDER = "#e2e8f0"

# (text, background) per badge tone
BADGE_TONES: dict[str, tuple[str, str]] = {
    "green": ("#15803d", "#f0fdf4"),
    "gray": ("#374151", "#f3f4f6"),
    "red": ("#b91c1c", "#fef2f2"),
    "amber": ("#b45309", "#fffbeb"),
}


def _badge_css() -> str:
    return "\n".join(
        f".badge-{tone} {{ color: {fg}; background: {bg}; }}"
        for tone, (fg, bg) in BADGE_TONES.items()
    )


def _build_css() -> str:
    return f"""
<style>
html, body, [class*="css"] {{
    font-family: 'Inter', 'Segoe UI', 'Helvetica Neue', sans-serif;
}}

.app-header {{
    background: linear-gradient(135deg, {_SLATE_DARK} 0%, {_BLUE_PRIMARY} 100%);
    padding: 1.25rem 1.75rem;
    border-radius: 12px;
    margin-bottom: 1.25rem;
    color: white;
}}
.app-header h1 {{ margin: 0; font-size: 1.6rem; font-weight: 700; }}
.app-header p {{ margin: 0.25rem 0 0 0; opacity: 0.85; font-size: 0.9rem; }}

.kpi-card {{
    background: white;
    border: 1px solid {_BORDER};
    border-radius: 12px;
    padding: 1rem 1.2rem;
    box-shadow: 0 1px 3px rgba(15, 23, 42, 0.06);
}}
.kpi-card .label {{
    font-size: 0.75rem;
    color: {_SLATE_MUTED};
    text-transform: uppercase;
    letter-spacing: 0.05em;
}}
.kpi-card .value {{
    font-size: 1.35rem;
    font-weight: 700;
    color: {_SLATE_DARK};
    margin-top: 0.2rem;
}}

.status-badge {{
    display: inline-block;
    padding: 0.1rem 0.55rem;
    border-radius: 999px;
    font-size: 0.7rem;
    font-weight: 600;
    letter-spacing: 0.03em;
}}
{_badge_css()}

.billing-table {{
    width: 100%;
    border-collapse: collapse;
    font-size: 0.8rem;
}}
.billing-table th {{
    background: {_SLATE_BG};
    color: {_SLATE_MUTED};
    text-align: left;
    padding: 0.45rem 0.6rem;
    border-bottom: 1px solid {_BORDER};
}}
.billing-table td {{
    padding: 0.45rem 0.6rem;
    border-bottom: 1px solid {_BORDER};
    color: {_SLATE_DARK};
}}

section[data-testid="stSidebar"] {{
    background: {_SLATE_BG};
}}
</style>
"""


_GLOBAL_CSS = _build_css()


def inject_global_styles() -> None:
    st.markdown(_GLOBAL_CSS, unsafe_allow_html=True)


def render_header(title: str, subtitle: str) -> None:
    """Render the page banner."""
    st.markdown(
        f"""
        <div class="app-header">
            <h1>{title}</h1>
            <p>{subtitle}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
