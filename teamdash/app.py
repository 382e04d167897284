"""The dashboard web application and its command-line entry point."""

from __future__ import annotations

import argparse
import os
from html import escape
from pathlib import Path
from typing import Sequence

from flask import Flask, request, send_from_directory

from .pages import render_home_page, render_not_found, render_team_page

TITLE = "Full-Stack Dashboard App"
STYLESHEET = "/pkg/dashboard-app.css"
DEFAULT_SITE_ROOT = "target/site"
DEFAULT_SITE_ADDR = "127.0.0.1:3000"


def render_document(body: str) -> str:
    """Wrap a page body in the full HTML document."""
    return (
        "<!DOCTYPE html>"
        '<html lang="en">'
        "<head>"
        '<meta charset="utf-8"/>'
        '<meta name="viewport" content="width=device-width, initial-scale=1"/>'
        f'<link id="leptos" rel="stylesheet" href="{STYLESHEET}"/>'
        f"<title>{escape(TITLE)}</title>"
        "</head>"
        '<body class="bg-gray-900 overflow-x-hide">'
        f"<main>{body}</main>"
        "</body>"
        "</html>"
    )


def create_app(site_root: str | os.PathLike[str] = DEFAULT_SITE_ROOT) -> Flask:
    """Build the Flask application serving pages and static files from ``site_root``."""
    root = Path(site_root).resolve()
    app = Flask(__name__, static_folder=None)

    @app.get("/")
    def home():
        return render_document(render_home_page(request.path))

    @app.get("/team")
    def team():
        return render_document(render_team_page(request.path))

    @app.get("/pkg/<path:filename>")
    def pkg(filename: str):
        return send_from_directory(root / "pkg", filename)

    @app.get("/assets/<path:filename>")
    def assets(filename: str):
        return send_from_directory(root, filename)

    @app.get("/favicon.ico")
    def favicon():
        return send_from_directory(root, "favicon.ico")

    @app.errorhandler(404)
    def not_found(_error):
        return render_document(render_not_found()), 404

    return app


def _parse_addr(value: str) -> tuple[str, int]:
    host, sep, port = value.rpartition(":")
    if not sep or not host or not port.isdigit() or not 0 < int(port) < 65536:
        raise argparse.ArgumentTypeError(f"invalid address {value!r}, expected HOST:PORT")
    return host, int(port)


def main(argv: Sequence[str] | None = None) -> None:
    """Serve the dashboard."""
    parser = argparse.ArgumentParser(prog="teamdash", description="Serve the team dashboard.")
    parser.add_argument(
        "--site-root",
        default=os.environ.get("LEPTOS_SITE_ROOT", DEFAULT_SITE_ROOT),
        help="directory holding pkg/, assets and favicon.ico",
    )
    parser.add_argument(
        "--addr",
        type=_parse_addr,
        default=os.environ.get("LEPTOS_SITE_ADDR", DEFAULT_SITE_ADDR),
        help="address to listen on, HOST:PORT",
    )
    args = parser.parse_args(argv)
    host, port = args.addr
    app = create_app(args.site_root)
    print(f"listening on http://{host}:{port}")
    app.run(host=host, port=port)