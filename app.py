"""AstroDash — Streamlit entry point.

    uv run streamlit run app.py
"""

from astrodash.app import main

main()
