"""AstroDash — Streamlit dashboard for mock moon phase and temperature data.

    uv run streamlit run app.py
"""

import asyncio
import html

import pytz
import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from astrodash.compute import (  # noqa: E402
    ALL_PHASES,
    PHASE_BUCKETS,
    format_clock,
    now_in_zone,
    slider_value_for_bucket,
)
from astrodash.config import ConfigError, Settings, configure_logging, load_settings  # noqa: E402
from astrodash.models import NavView  # noqa: E402
from astrodash.renderers.plotly_chart import render_temperature_chart  # noqa: E402
from astrodash.renderers.table import record_rows, summary_items  # noqa: E402
from astrodash.session import simulated_load  # noqa: E402
from astrodash.strings import ABOUT_DEVELOPER, ABOUT_FEATURES, t  # noqa: E402
from astrodash.view_model import DataViewModel  # noqa: E402

_NAV_ITEMS: tuple[tuple[NavView, str], ...] = (
    (NavView.DASHBOARD, "nav_dashboard"),
    (NavView.SEARCH, "nav_search"),
    (NavView.ABOUT, "nav_about"),
)

_CSS = """
<style>
html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
    background-color: #0d1b35 !important;
    color: #e8e8e8;
}
[data-testid="stSidebar"] {
    background-color: #050a1a !important;
}
[data-testid="stHeader"], [data-testid="stToolbar"] {
    display: none !important;
}
.stat-card, .about-card {
    background: rgba(126, 200, 227, 0.08);
    border: 1px solid rgba(126, 200, 227, 0.25);
    border-radius: 12px;
    padding: 1.2rem 1.6rem;
    text-align: center;
    margin-bottom: 1rem;
}
.about-card { text-align: left; }
.stat-card h2 { color: #e8d5a3; margin: 0; font-size: 1.5rem; }
.stat-card p { color: #aaaaaa; margin: 0.3rem 0 0; }
.moon-icon { font-size: 2.6rem; line-height: 1; }
.loading {
    height: 60vh;
    display: flex;
    align-items: center;
    justify-content: center;
    color: #7ec8e3;
    font-size: 1.2rem;
}
.phase-label { color: #7ec8e3; font-weight: 600; }
</style>
"""


def _stat_card(title_html: str, caption: str) -> str:
    return f"<div class='stat-card'>{title_html}<p>{html.escape(caption)}</p></div>"


def _detect_timezone(settings: Settings) -> str | None:
    """Configured zone, else the browser's zone, cached in session_state.

    On the first run the JS call returns None; the rerun triggered by
    streamlit_js_eval fills it in.
    """
    if settings.tz_name:
        return settings.tz_name
    if "tz_name" not in st.session_state:
        browser_tz: str | None = streamlit_js_eval(
            js_expressions="Intl.DateTimeFormat().resolvedOptions().timeZone",
            key="_tz_detect",
            height=0,
        )
        if browser_tz is not None:
            st.session_state.tz_name = browser_tz if browser_tz in pytz.all_timezones_set else None
    return st.session_state.get("tz_name")


def _render_table(vm: DataViewModel) -> None:
    st.dataframe(record_rows(vm.filtered_records), hide_index=True, use_container_width=True)


def _render_dashboard(vm: DataViewModel, settings: Settings) -> None:
    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown(
            _stat_card(f"<h2>{t('card_location')}</h2>", vm.location_display),
            unsafe_allow_html=True,
        )
    with col2:

        @st.fragment(run_every=settings.clock_interval_seconds)
        def _clock_card() -> None:
            vm.current_time = format_clock(now_in_zone(vm.tz_name))
            st.markdown(
                _stat_card(f"<h2>{vm.current_time}</h2>", t("card_moon_rise")),
                unsafe_allow_html=True,
            )

        _clock_card()
    with col3:
        st.markdown(
            _stat_card(
                f"<span class='moon-icon'>{vm.current_phase_glyph}</span>",
                t("card_moon_phase"),
            ),
            unsafe_allow_html=True,
        )

    search_col, slider_col, button_col = st.columns([3, 3, 1])
    with search_col:
        vm.search_term = st.text_input(
            t("placeholder_search"),
            value=vm.search_term,
            placeholder=t("placeholder_search"),
            label_visibility="collapsed",
        )
    with slider_col:
        vm.phase_slider_value = st.slider(
            t("label_phase"),
            min_value=0.0,
            max_value=100.0,
            value=float(vm.phase_slider_value),
            step=0.5,
        )
        st.markdown(
            f"<span class='phase-label'>{html.escape(vm.phase_bucket)}</span>",
            unsafe_allow_html=True,
        )
    with button_col:
        if st.button(t("btn_search"), key="dashboard_search_btn", use_container_width=True):
            vm.navigation.submit_search()
            st.rerun()

    _render_table(vm)
    st.plotly_chart(
        render_temperature_chart(vm.filtered_records),
        use_container_width=True,
        config={"displayModeBar": False},
    )

    for col, (label, value) in zip(st.columns(3), summary_items(vm.summary)):
        with col:
            st.markdown(f"**{label}** {value}")


def _render_search(vm: DataViewModel) -> None:
    st.title(t("search_title"))
    date_col, phase_col, button_col = st.columns([3, 3, 1])
    with date_col:
        vm.search_term = st.text_input(
            t("label_search_date"),
            value=vm.search_term,
            placeholder=t("placeholder_search_date"),
        )
    with phase_col:
        current = vm.phase_bucket
        choice = st.selectbox(
            t("label_phase_filter"),
            options=PHASE_BUCKETS,
            index=PHASE_BUCKETS.index(current),
            format_func=lambda label: t("option_all_phases") if label == ALL_PHASES else label,
        )
        if choice != current:
            vm.phase_slider_value = slider_value_for_bucket(choice)
    with button_col:
        st.markdown("<div style='height:1.9rem'></div>", unsafe_allow_html=True)
        if st.button(t("btn_search"), key="search_view_btn", use_container_width=True):
            vm.navigation.submit_search()
            st.rerun()

    if vm.navigation.results_visible:
        st.subheader(t("search_results", count=len(vm.filtered_records)))
        _render_table(vm)


def _render_about() -> None:
    st.title(t("about_title"))
    features = "".join(f"<li>{html.escape(item)}</li>" for item in ABOUT_FEATURES)
    developer = "".join(
        f"<p><strong>{html.escape(k)}:</strong> {html.escape(v)}</p>" for k, v in ABOUT_DEVELOPER
    )
    st.markdown(
        f"<div class='about-card'><h3>{t('about_what_title')}</h3>"
        f"<p>{html.escape(t('about_what_body'))}</p></div>"
        f"<div class='about-card'><h3>{t('about_features_title')}</h3><ul>{features}</ul></div>"
        f"<div class='about-card'><h3>{t('about_developer_title')}</h3>{developer}</div>",
        unsafe_allow_html=True,
    )


def main() -> None:
    st.set_page_config(
        page_title=t("page_title"),
        page_icon="🌌",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    try:
        settings = load_settings()
    except ConfigError as e:
        st.error(t("error_config", error=e))
        st.stop()
    configure_logging(settings)

    st.markdown(_CSS, unsafe_allow_html=True)

    # --- Session state initialization ---
    if "view_model" not in st.session_state:
        st.session_state.view_model = DataViewModel(location=settings.location)
    vm: DataViewModel = st.session_state.view_model
    vm.set_tz_name(_detect_timezone(settings))

    # --- One-shot simulated load ---
    if vm.loading:
        st.markdown(f"<div class='loading'>{t('loading')}</div>", unsafe_allow_html=True)
        vm.set_records(asyncio.run(simulated_load(settings.load_delay_seconds)))
        st.rerun()

    # --- Sidebar navigation ---
    with st.sidebar:
        st.header(t("logo"))
        for view, label_key in _NAV_ITEMS:
            active = vm.navigation.active_view is view
            if st.button(
                t(label_key),
                key=f"nav_{view.value}",
                type="primary" if active else "secondary",
                use_container_width=True,
            ):
                vm.navigation.select(view)
                st.rerun()

    if vm.navigation.active_view is NavView.DASHBOARD:
        _render_dashboard(vm, settings)
    elif vm.navigation.active_view is NavView.SEARCH:
        _render_search(vm)
    else:
        _render_about()


if __name__ == "__main__":
    main()
