"""Markdown + LaTeX rendering of prompts and review pages for QWebEngineView.

Prompts may contain Markdown and ``$...$`` math. Both are rendered to HTML here
and MathJax typesets the math when the page is displayed.
"""

from __future__ import annotations

from html import escape

from markdown_it import MarkdownIt

from quiz_player.constants.about import APP_NAME
from quiz_player.constants.ui_constants import NO_ANSWER_TEXT, REVIEW_TITLE, SCORE_TEMPLATE
from quiz_player.core.models import Question, ReviewEntry, SessionReport

_MATHJAX_SCRIPT = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"

_markdown = MarkdownIt("commonmark", {"html": False}).enable("table").enable("strikethrough")


def render_markdown(text: str) -> str:
    sanitized = text.strip()
    if not sanitized:
        return "<p><em>No content provided.</em></p>"
    return _markdown.render(sanitized)


def _document(body_html: str, font_size: int) -> str:
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{APP_NAME}</title>
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; font-size: {font_size}pt; }}
      .correct {{ color: #4CAF50; }}
      .incorrect {{ color: #F44336; }}
      .review-item {{ margin-bottom: 1rem; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }} }};
    </script>
    <script defer src="{_MATHJAX_SCRIPT}"></script>
  </head>
  <body>{body_html}</body>
</html>"""


def render_question(question: Question, font_size: int = 16) -> str:
    """Render the prompt of ``question``; options are shown as buttons by the window."""
    return _document(render_markdown(question.prompt), font_size)


def _render_review_entry(entry: ReviewEntry) -> str:
    chosen = entry.user_answer_text if entry.user_answer_text is not None else NO_ANSWER_TEXT
    css_class = "correct" if entry.is_correct else "incorrect"
    return (
        '<div class="review-item">'
        f"{render_markdown(entry.prompt)}"
        f"<p>Your Answer: {escape(chosen)}</p>"
        f'<p class="{css_class}">Correct Answer: {escape(entry.correct_option_text or "")}</p>'
        "</div>"
    )


def render_review(report: SessionReport, font_size: int = 14) -> str:
    """Render the score header followed by one block per answered question."""
    score_line = SCORE_TEMPLATE.format(score=report.score, total=report.total_answered)
    parts = [f"<h2>{escape(score_line)}</h2>", f"<h3>{escape(REVIEW_TITLE)}</h3>"]
    parts.extend(_render_review_entry(entry) for entry in report.entries)
    return _document("\n".join(parts), font_size)
