"""Navigation header shown at the top of every page."""

from __future__ import annotations

from html import escape

INPUT_STYLE = "border-b-0 border-[#7734e7] h-8 text-white ml-4 mr-4 hover:border-b-2"
INPUT_STYLE_SELECTED = (
    "border-b-2 border-[#9734e7] h-8 text-white ml-4 mr-4 hover:border-b-2"
)

_BAR_CLASS = "flex mx-auto align-center items-center w-full h-12 pt-8 px-20 top-0 fixed"
_NAV_CLASS = "flex flex-row w-full max-w-[52rem] h-12"

NAV_LINKS = (("/", "Dashboard"), ("/team", "Team"))


def get_style_from_url(current_path: str, match_url: str) -> str:
    """Return the selected style when the current path is the link's target."""
    return INPUT_STYLE_SELECTED if current_path == match_url else INPUT_STYLE


def render_header(current_path: str) -> str:
    """Render the header HTML, highlighting the link for ``current_path``."""
    links = "".join(
        f'<div class="{escape(get_style_from_url(current_path, href))}">'
        f'<a href="{escape(href)}">{escape(label)}</a></div>'
        for href, label in NAV_LINKS
    )
    return f'<div class="{_BAR_CLASS}"><nav class="{_NAV_CLASS}">{links}</nav></div>'