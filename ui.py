import streamlit as st

CSS = """
.card {border: 1px solid #e5e7eb; border-radius: 10px; padding: 12px 14px; margin-bottom: 8px;}
.card.base {background: rgba(8, 145, 178, 0.05); box-shadow: 0 0 0 2px rgba(8, 145, 178, 0.2);}
.caption {color: #6b7280; font-size: 0.85rem;}
.kpi {font-size: 1.4rem; font-weight: 700;}
.up {color: #059669;} .down {color: #dc2626;} .flat {color: #6b7280;}
.badge {display: inline-block; padding: 2px 8px; border-radius: 999px; background: #f3f4f6; font-size: 0.75rem;}
"""

TREND_ICONS = {"up": "▲", "down": "▼", "flat": "–"}


def inject_css():
    st.markdown(f"<style>{CSS}</style>", unsafe_allow_html=True)


def header(title: str, subtitle: str = ""):
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)


def helptext(text: str):
    st.caption(text)


def kpi_card(caption: str, value: str, sub: str = "", css_class: str = ""):
    sub_html = f"<div class='caption {css_class}'>{sub}</div>" if sub else ""
    return (f"<div class='card'><div class='caption'>{caption}</div>"
            f"<div class='kpi'>{value}</div>{sub_html}</div>")


def trend_label(trend: str, text: str) -> str:
    return f"<span class='{trend}'>{TREND_ICONS.get(trend, '')} {text}</span>"
