# ui/markdown_renderer.py
# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from markdown import markdown

from anotherday.domain.models import DayReport


@dataclass(frozen=True)
class MarkdownTheme:
    text: str = "#111827"
    muted: str = "#6B7280"
    border: str = "#E5E7EB"
    panel: str = "#FFFFFF"
    link: str = "#2563EB"
    accent: str = "#0891B2"


def _cell(value: Optional[str]) -> str:
    # a bare pipe would split the table cell
    return (value or "").replace("|", "\\|").strip()


class MarkdownRenderer:
    """
    Single responsibility:
    - Turn day reports into a markdown document
    - Convert MD -> standalone HTML (with CSS)
    """

    def __init__(self, theme: Optional[MarkdownTheme] = None):
        self.theme = theme or MarkdownTheme()

    # ---------- markdown ----------
    def to_markdown(self, reports: List[DayReport], title: str = "Work log") -> str:
        out: List[str] = [f"# {title}", ""]
        if not reports:
            out.append("_No records._")
            return "\n".join(out) + "\n"

        for report in reports:
            out.append(f"## {report.day}")
            out.append("")
            if not report.rows:
                out.append("_No tasks._")
                out.append("")
                continue
            out.append("| Time | Project | ID | Task |")
            out.append("| ---: | --- | --- | --- |")
            for row in report.rows:
                out.append(
                    f"| {_cell(row.timestamp_label)} | {_cell(row.project)} "
                    f"| {_cell(row.id)} | {_cell(row.label)} |"
                )
            out.append("")
            out.append(f"**Total:** {report.total_hours:.1f}h")
            out.append("")

        total = sum(r.total_hours for r in reports)
        if len(reports) > 1:
            out.append("---")
            out.append("")
            out.append(f"**Range total:** {total:.1f}h")
            out.append("")
        return "\n".join(out)

    # ---------- extensions ----------
    def extensions(self) -> Tuple[List[str], Dict]:
        exts: List[str] = [
            "extra",
            "sane_lists",
            "tables",
            "attr_list",
            "toc",
            # task labels often carry links and ~~struck~~ items
            "pymdownx.magiclink",
            "pymdownx.tilde",
        ]
        cfg: Dict = {
            "pymdownx.magiclink": {"hide_protocol": True},
        }
        return exts, cfg

    # ---------- CSS ----------
    def css(self) -> str:
        t = self.theme
        return f"""
        :root {{
          --text: {t.text};
          --muted: {t.muted};
          --border: {t.border};
          --panel: {t.panel};
          --link: {t.link};
          --accent: {t.accent};
          --soft: #F9FAFB;
        }}

        body {{
          font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
          margin: 24px;
          color: var(--text);
          background: var(--panel);
          font-size: 14px;
          line-height: 1.55;
        }}

        h1 {{ font-size: 1.35em; }}
        h2 {{
          font-size: 1.10em;
          color: var(--accent);
          text-decoration: underline;
          margin: 1.2em 0 0.4em;
        }}

        a {{ color: var(--link); text-decoration: none; }}

        hr {{
          border: 0;
          border-top: 1px solid var(--border);
          margin: 1em 0;
        }}

        table {{
          border-collapse: collapse;
          width: 100%;
          margin: 0.6em 0;
          font-size: 0.95em;
        }}
        th, td {{
          border: 1px solid var(--border);
          padding: 6px 10px;
          vertical-align: top;
        }}
        th {{
          background: var(--soft);
          font-weight: 700;
        }}
        td:first-child {{
          white-space: nowrap;
          font-variant-numeric: tabular-nums;
        }}
        """

    # ---------- render ----------
    def to_html(self, md_text: str, title: str = "Work log") -> str:
        exts, cfg = self.extensions()
        body = markdown(
            md_text or "",
            extensions=exts,
            extension_configs=cfg,
            output_format="html",
        )
        return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8"/>
    <title>{title}</title>
    <style>{self.css()}</style>
  </head>
  <body>{body}</body>
</html>
"""

    def render_reports(self, reports: List[DayReport], title: str = "Work log") -> str:
        return self.to_html(self.to_markdown(reports, title=title), title=title)
