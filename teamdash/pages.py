"""Page bodies served by the dashboard."""

from __future__ import annotations

from .header import render_header

_PAGE_CLASS = (
    "w-full max-w-[64rem] mx-auto items-center justify-center align-center text-white"
)


def _page(current_path: str, text: str) -> str:
    return f'<div class="{_PAGE_CLASS}">{render_header(current_path)}{text}</div>'


def render_home_page(current_path: str) -> str:
    """Render the dashboard landing page."""
    return _page(current_path, "Home Page here")


def render_team_page(current_path: str) -> str:
    """Render the team page."""
    return _page(current_path, "Team Page Here")


def render_not_found() -> str:
    """Render the body shown for unknown routes."""
    return "<h1>Not Found</h1>"