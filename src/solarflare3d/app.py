"""Solar Flare 3D: Streamlit app showing the most significant recent flare on a 3D Sun."""

import datetime
import html
import logging

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from solarflare3d.details import flare_detail_rows, linked_event_lines  # noqa: E402
from solarflare3d.donki import (  # noqa: E402
    FlareFetchError,
    default_start_date,
    fetch_flares,
    flare_window,
)
from solarflare3d.i18n import t  # noqa: E402
from solarflare3d.ranking import build_flare_view  # noqa: E402
from solarflare3d.renderers.plotly_3d import render_animated_figure  # noqa: E402
from solarflare3d.renderers.textures import load_texture  # noqa: E402
from solarflare3d.state import (  # noqa: E402
    apply_fetch_error,
    apply_fetch_result,
    begin_fetch,
    initial_state,
)

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🌞",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---

if "view_state" not in st.session_state:
    st.session_state.view_state = initial_state(default_start_date())
if "fetched_date" not in st.session_state:
    st.session_state.fetched_date = None

# --- Dark theme CSS (static) ---
st.markdown(
    """
    <style>
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #000000 !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .flare-panel {
        background: rgba(20,20,20,0.92);
        padding: 22px 24px;
        border-radius: 18px;
        box-shadow: 0 0 18px 2px #000, 0 0 4px #ffd47f inset;
        color: #FFD47F;
        line-height: 1.35;
        text-shadow: 1px 1px 5px #ebb427, 0 0 2px #fff;
        font-family: monospace, sans-serif;
    }
    .flare-panel h1 { color: #FFD47F; font-size: 1.28em; }
    .flare-panel h2 { color: #FFD47F; font-size: 1.1em; margin-bottom: 14px; }
    .flare-linked {
        margin: 18px 0;
        padding: 10px 8px;
        background: rgba(60,60,50,0.80);
        border-radius: 8px;
        box-shadow: 0 0 6px #ffd47f55;
    }
    .flare-error { color: #ff3939; }
    label, [data-testid="stWidgetLabel"] p { color: #FFF39E !important; }
    </style>
    """,
    unsafe_allow_html=True,
)

left, center, right = st.columns([1, 2.4, 1])

# --- Left panel: title, date picker, status, controls ---
with left:
    st.markdown(
        f"<div class='flare-panel'><h1>{t('app_title', _lang)}</h1>"
        f"<p>{t('app_subtitle', _lang)}</p></div>",
        unsafe_allow_html=True,
    )
    start_date = st.date_input(
        t("label_date", _lang),
        value=st.session_state.view_state.start_date,
        max_value=datetime.date.today(),
    )
    status_placeholder = st.empty()

# --- Fetch on date change ---
if start_date != st.session_state.fetched_date:
    state = begin_fetch(st.session_state.view_state, start_date)
    generation = state.generation
    st.session_state.view_state = state
    st.session_state.fetched_date = start_date
    status_placeholder.markdown(t("loading", _lang))
    try:
        batch = fetch_flares(flare_window(start_date))
        state = apply_fetch_result(st.session_state.view_state, generation, batch)
    except FlareFetchError as e:
        logger.error("Error fetching flare data: %s", e)
        state = apply_fetch_error(st.session_state.view_state, generation, str(e))
    st.session_state.view_state = state
    status_placeholder.empty()

view_state = st.session_state.view_state

with left:
    if view_state.error:
        st.markdown(
            "<span class='flare-error'>"
            + t("error_fetch", _lang).format(error=html.escape(view_state.error))
            + "</span>",
            unsafe_allow_html=True,
        )
    st.markdown(
        f"<div class='flare-panel'><b>{t('controls_title', _lang)}</b><br>"
        f"{t('controls_body', _lang)}<br><small>{t('credit', _lang)}</small></div>",
        unsafe_allow_html=True,
    )

# --- Center: 3D Sun ---
view = build_flare_view(view_state.flare)
with center:
    fig = render_animated_figure(view, texture=load_texture())
    st.plotly_chart(
        fig,
        use_container_width=True,
        config={"scrollZoom": True, "displayModeBar": False},
    )

# --- Right panel: flare details + linked events ---
with right:
    flare = view_state.flare
    if flare is None:
        st.markdown(
            f"<div class='flare-panel' style='color:#fff;text-align:center;'>"
            f"{t('no_flare', _lang)}</div>",
            unsafe_allow_html=True,
        )
    else:
        rows = "".join(
            f"<div><b>{html.escape(label)}:</b> {html.escape(value)}</div>"
            for label, value in flare_detail_rows(flare, _lang)
        )
        events = linked_event_lines(flare)
        linked = (
            "".join(f"<div>• {html.escape(ev)}</div>" for ev in events)
            if events
            else f"<span>{t('linked_none', _lang)}</span>"
        )
        no_marker = "" if view.position is not None else f"<p><i>{t('no_marker', _lang)}</i></p>"
        st.markdown(
            f"<div class='flare-panel'><h2>{t('details_title', _lang)}</h2>{rows}"
            f"<div class='flare-linked'><b>{t('linked_title', _lang)}:</b><br>{linked}</div>"
            f"{no_marker}</div>",
            unsafe_allow_html=True,
        )
