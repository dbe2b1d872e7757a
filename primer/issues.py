"""Print GitHub issues as a table, an HTML page or a plain-text report."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from urllib.parse import quote

import jinja2

from primer.github import Issue, IssuesSearchResult, SearchError, search_issues

_RULE = "----------------------------------------"
_SAFE_SCHEMES = ("http", "https", "mailto")


class _TrustedHTML(str):
    """Text known to be safe HTML, inserted without escaping."""

    def __html__(self) -> str:
        return str(self)


def _safe_url(url: object) -> str:
    text = str(url)
    scheme, sep, _ = text.partition(":")
    if sep and "/" not in scheme and scheme.lower() not in _SAFE_SCHEMES:
        return "#ZgotmplZ"
    return quote(text, safe="!#$%&*+,/:;=?@[]")


_ENV = jinja2.Environment(autoescape=True, keep_trailing_newline=True)
_ENV.filters["url"] = _safe_url

_ISSUE_LIST = _ENV.from_string(
    """
<h1>{{ total_count }} issues</h1>
<table>
<tr style='text-align: left'>
  <th>#</th>
  <th>State</th>
  <th>User</th>
  <th>Title</th>
</tr>
{% for item in items %}
<tr>
  <td><a href='{{ item.html_url | url }}'>{{ item.number }}</a></td>
  <td>{{ item.state }}</td>
  <td><a href='{{ item.user.html_url | url }}'>{{ item.user.login }}</a></td>
  <td><a href='{{ item.html_url | url }}'>{{ item.title }}</a></td>
</tr>
{% endfor %}
</table>
"""
)

_ESCAPE_DEMO = _ENV.from_string("<p>A: {{ a }}</p><p>B: {{ b }}</p>")


def _issues(result: IssuesSearchResult) -> list[Issue]:
    return [item for item in result.items if item is not None]


def _login(item: Issue) -> str:
    return item.user.login if item.user is not None else ""


def days_ago(t: datetime, now: datetime | None = None) -> int:
    """Whole days elapsed from ``t`` to ``now`` (default: the current time)."""
    current = datetime.now(timezone.utc) if now is None else now
    return int((current - t) / timedelta(days=1))


def format_table(result: IssuesSearchResult) -> str:
    """One line per issue: number, user and title, truncated to fit."""
    lines = [f"{result.total_count} issues:\n"]
    lines.extend(
        f"#{item.number:<5d} {_login(item):>9.9} {item.title:.55}\n" for item in _issues(result)
    )
    return "".join(lines)


def render_html(result: IssuesSearchResult) -> str:
    """Render the issues as an HTML table with all values escaped."""
    return _ISSUE_LIST.render(total_count=result.total_count, items=_issues(result))


def render_report(result: IssuesSearchResult, now: datetime | None = None) -> str:
    """Render a plain-text report with each issue's age in days."""
    current = datetime.now(timezone.utc) if now is None else now
    parts = [f"{result.total_count} issues:\n"]
    for item in _issues(result):
        parts.append(
            f"{_RULE}\n"
            f"Number: {item.number}\n"
            f"User:   {_login(item)}\n"
            f"Title:  {item.title[:64]}\n"
            f"Age:    {days_ago(item.created_at, current)} days\n"
        )
    return "".join(parts)


def render_autoescape() -> str:
    """Show untrusted text escaped beside trusted HTML left as it is."""
    return _ESCAPE_DEMO.render(a="<b>Hello!</b>", b=_TrustedHTML("<b>Hello!</b>"))


def _search(argv: list[str] | None) -> IssuesSearchResult | None:
    terms = sys.argv[1:] if argv is None else argv
    try:
        return search_issues(terms)
    except (SearchError, OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return None


def main(argv: list[str] | None = None) -> int:
    """Print a table of issues matching the search terms."""
    result = _search(argv)
    if result is None:
        return 1
    sys.stdout.write(format_table(result))
    return 0


def html_main(argv: list[str] | None = None) -> int:
    """Print an HTML table of issues matching the search terms."""
    result = _search(argv)
    if result is None:
        return 1
    sys.stdout.write(render_html(result))
    return 0


def report_main(argv: list[str] | None = None) -> int:
    """Print a report of issues matching the search terms."""
    result = _search(argv)
    if result is None:
        return 1
    sys.stdout.write(render_report(result))
    return 0