# asset_sentiment/views/table.py
from __future__ import annotations

import html
import math
import re
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from email.utils import parsedate_to_datetime
from typing import List, Optional, Sequence

from asset_sentiment.models.sentiment_schema import Article

COLUMNS = ("Title", "Description", "Published", "Sentiment", "Score", "Link")
LINK_TEXT = "Read More"
KNOWN_LABELS = frozenset({"positive", "neutral", "negative"})

# "...T10:00:00+0000" -> "...T10:00:00+00:00"; fromisoformat only takes the latter before 3.11
_COMPACT_OFFSET = re.compile(r"(\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?[+-]\d{2})(\d{2})$")
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class ArticleRow:
    title: str
    description: str
    published: str
    sentiment: str
    sentiment_class: str
    score: str
    link: str


def _parse_iso(v: str) -> Optional[datetime]:
    # Accept e.g. "2025-09-15T14:40:39Z"
    v = v.replace("Z", "+00:00") if v.endswith("Z") else v
    v = _COMPACT_OFFSET.sub(r"\1:\2", v)
    try:
        return datetime.fromisoformat(v)
    except ValueError:
        return None


def _parse_rfc2822(v: str) -> Optional[datetime]:
    # e.g. "Mon, 15 Sep 2025 14:40:39 GMT", common in RSS feeds
    try:
        return parsedate_to_datetime(v)
    except (TypeError, ValueError, IndexError):
        return None


def format_date(raw: str) -> str:
    """Render a parseable date as M/D/YYYY, anything else unchanged."""
    v = (raw or "").strip()
    dt = (_parse_iso(v) or _parse_rfc2822(v)) if v else None
    if dt is None:
        return raw
    return f"{dt.month}/{dt.day}/{dt.year}"


def sentiment_css_class(label: str) -> str:
    key = label.lower()
    return key if key in KNOWN_LABELS else ""


def format_score(score: float) -> str:
    """Two decimals, ties rounded away from zero on the exact binary value."""
    if math.isnan(score):
        return "NaN"
    if math.isinf(score):
        return "Infinity" if score > 0 else "-Infinity"
    with localcontext() as ctx:
        # enough digits for any finite double
        ctx.prec = 400
        return str(Decimal(score).quantize(_CENTS, rounding=ROUND_HALF_UP))


def article_rows(articles: Sequence[Article]) -> List[ArticleRow]:
    """One row per article, in backend order."""
    return [
        ArticleRow(
            title=a.title,
            description=a.description,
            published=format_date(a.date),
            sentiment=a.sentiment.label,
            sentiment_class=sentiment_css_class(a.sentiment.label),
            score=format_score(a.sentiment.score),
            link=a.link,
        )
        for a in articles
    ]


def _cell(text: str) -> str:
    # a blank line inside st.markdown would end the raw HTML block
    return html.escape(text).replace("\r\n", "\n").replace("\r", "\n").replace("\n", "<br>")


def _row_html(row: ArticleRow) -> str:
    esc = _cell
    cls = f' class="{row.sentiment_class}"' if row.sentiment_class else ""
    return (
        "<tr>"
        f"<td>{esc(row.title)}</td>"
        f"<td>{esc(row.description)}</td>"
        f"<td>{esc(row.published)}</td>"
        f"<td{cls}>{esc(row.sentiment)}</td>"
        f"<td>{esc(row.score)}</td>"
        f'<td><a href="{html.escape(row.link)}" target="_blank" rel="noreferrer">{LINK_TEXT}</a></td>'
        "</tr>"
    )


def render_articles_table(articles: Sequence[Article]) -> str:
    head = "".join(f"<th>{c}</th>" for c in COLUMNS)
    body = "".join(_row_html(r) for r in article_rows(articles))
    return (
        '<div class="table-wrapper"><table class="articles-table">'
        f"<thead><tr>{head}</tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table></div>"
    )
