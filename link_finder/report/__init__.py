# File: link_finder/report/__init__.py
"""link_finder.report: сохранение результатов обхода в JSON и HTML."""

from __future__ import annotations

from pathlib import Path

from link_finder.report.html_report import render_html
from link_finder.report.json_report import render_json

#: bundled Jinja2 templates
DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

__all__ = ["render_json", "render_html", "DEFAULT_TEMPLATE_DIR"]
