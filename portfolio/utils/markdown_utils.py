from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Optional

from flask import current_app, has_app_context
from markdown2 import markdown

from portfolio import content

FALLBACK_TEXT = "File cannot be used"

# GitHub-flavoured subset the article bodies rely on
MARKDOWN_EXTRAS = ["tables", "fenced-code-blocks", "strike", "task_list", "cuddled-lists"]


@dataclass(frozen=True)
class RenderResult:
    html: str
    source: str
    is_fallback: bool = False

    @classmethod
    def ok(cls, html: str, source: str) -> "RenderResult":
        return cls(html=html, source=source, is_fallback=False)

    @classmethod
    def fallback(cls) -> "RenderResult":
        return cls(html=render_markdown(FALLBACK_TEXT), source=FALLBACK_TEXT, is_fallback=True)


def _log_warning(msg: str, *args) -> None:
    if has_app_context():
        current_app.logger.warning(msg, *args)


def find_article(article_id, records: Optional[Iterable[content.Article]] = None) -> Optional[content.Article]:
    """
    Look up article metadata by id. Ids compare as strings, the way they
    arrive from the URL, so "0" and 0 both match the first article.
    """
    if records is None:
        records = content.articles.data
    wanted = str(article_id)
    return next((a for a in records if str(a.id) == wanted), None)


def article_path(article_id, articles_dir: str) -> str:
    return os.path.join(articles_dir, f"{article_id}.md")


def render_markdown(text: str) -> str:
    return str(markdown(text or "", extras=MARKDOWN_EXTRAS))


def read_article_body(article_id, articles_dir: str) -> RenderResult:
    """
    Read <articles_dir>/<id>.md and render it. A missing or unreadable file
    is not an error for the page: the fallback text is rendered instead.
    """
    path = article_path(article_id, articles_dir)
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        _log_warning("Article %s body unavailable at %s: %s", article_id, path, e)
        return RenderResult.fallback()
    return RenderResult.ok(render_markdown(source), source)
