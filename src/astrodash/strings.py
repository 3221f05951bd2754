"""UI label table — every user-facing string in one place."""

_STRINGS: dict[str, str] = {
    "page_title": "AstroDash",
    "logo": "🌌 AstroDash",
    "nav_dashboard": "🏠 Dashboard",
    "nav_search": "🔍 Search",
    "nav_about": "ℹ️ About",
    "loading": "Loading astronomical data...",
    "card_location": "Location",
    "card_moon_rise": "Moon Rise",
    "card_moon_phase": "Moon Phase",
    "placeholder_search": "Enter Date",
    "placeholder_search_date": "Enter date (YYYY-MM-DD)",
    "label_search_date": "Search by Date:",
    "label_phase": "Moon Phase:",
    "label_phase_filter": "Filter by Moon Phase:",
    "option_all_phases": "All Phases",
    "btn_search": "Search",
    "col_date": "Date",
    "col_temperature": "Temperature",
    "col_time": "Time",
    "col_phase": "Phase",
    "temperature": "{value} °F",
    "summary_total": "Total Records:",
    "summary_avg_temp": "Average Temperature:",
    "summary_unique_phases": "Unique Moon Phases:",
    "search_title": "🔍 Advanced Search",
    "search_results": "Search Results ({count} found)",
    "about_title": "ℹ️ About AstroDash",
    "about_what_title": "What is AstroDash?",
    "about_what_body": (
        "AstroDash is a beautiful astronomical data dashboard that displays moon phases, "
        "weather data, and celestial information. It provides real-time updates and allows "
        "users to search and filter through astronomical data."
    ),
    "about_features_title": "🌙 Features",
    "about_developer_title": "👨‍💻 Developer",
    "chart_title": "Temperature by Night",
    "error_config": "Configuration error: {error}",
}

ABOUT_FEATURES: tuple[str, ...] = (
    "Real-time moon phase tracking",
    "Weather data integration",
    "Advanced search and filtering",
    "Beautiful space-themed UI",
    "Responsive design",
)

ABOUT_DEVELOPER: tuple[tuple[str, str], ...] = (
    ("Name", "himavant kerpurapu"),
    ("Project", "Web Development Project 5- Data Dashboard"),
    ("Time Spent", "6 hours"),
    ("Technologies", "Python, Streamlit, Plotly"),
)


def t(key: str, **kwargs: object) -> str:
    """Return the label for key, formatted with kwargs.

    Falls back to the key itself if not found.
    """
    text = _STRINGS.get(key)
    if text is None:
        return key
    return text.format(**kwargs) if kwargs else text
