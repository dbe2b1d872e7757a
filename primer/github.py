"""Search the GitHub issue tracker."""

from __future__ import annotations

import json
import re
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import quote_plus

ISSUES_URL = "https://api.github.com/search/issues"

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)


class SearchError(Exception):
    """The issue search could not be completed."""


@dataclass
class User:
    """A GitHub account."""

    login: str = ""
    html_url: str = ""


@dataclass
class Issue:
    """One issue from the tracker; ``body`` is Markdown."""

    number: int = 0
    html_url: str = ""
    title: str = ""
    state: str = ""
    user: User | None = None
    created_at: datetime = ZERO_TIME
    body: str = ""


@dataclass
class IssuesSearchResult:
    """The total number of matches and the issues returned."""

    total_count: int = 0
    items: list[Issue | None] = field(default_factory=list)


def _kind(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _object(value: Any, what: str) -> dict[str, Any]:
    """Return the object's members keyed by lower-cased name; later keys win."""
    if not isinstance(value, dict):
        raise ValueError(f"json: cannot unmarshal {_kind(value)} into {what}")
    return {key.lower(): member for key, member in value.items()}


def _str(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"json: cannot unmarshal {_kind(value)} into field {key} of type string")
    return value


def _int(obj: dict[str, Any], key: str) -> int:
    value = obj.get(key)
    if value is None:
        return 0
    if type(value) is not int:
        raise ValueError(f"json: cannot unmarshal {_kind(value)} into field {key} of type int")
    return value


def _parse_time(text: str) -> datetime:
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"parsing time {json.dumps(text)} as RFC 3339: invalid format")
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction, zone = match.group(7), match.group(8)
    micros = int((fraction or "0")[:6].ljust(6, "0"))
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    return datetime(year, month, day, hour, minute, second, micros, tzinfo=tz)


def _time(obj: dict[str, Any], key: str) -> datetime:
    value = obj.get(key)
    if value is None:
        return ZERO_TIME
    if not isinstance(value, str):
        raise ValueError(f"json: cannot unmarshal {_kind(value)} into field {key} of type time")
    return _parse_time(value)


def _user(value: Any) -> User | None:
    if value is None:
        return None
    obj = _object(value, "User")
    return User(login=_str(obj, "login"), html_url=_str(obj, "html_url"))


def _issue(value: Any) -> Issue | None:
    if value is None:
        return None
    obj = _object(value, "Issue")
    return Issue(
        number=_int(obj, "number"),
        html_url=_str(obj, "html_url"),
        title=_str(obj, "title"),
        state=_str(obj, "state"),
        user=_user(obj.get("user")),
        created_at=_time(obj, "created_at"),
        body=_str(obj, "body"),
    )


def search_url(terms: list[str]) -> str:
    """Return the query URL for the search terms."""
    return ISSUES_URL + "?q=" + quote_plus(" ".join(terms), safe="")


def parse_search_result(data: str | bytes) -> IssuesSearchResult:
    """Decode a JSON search response; field names match without regard to case.

    Raises ValueError if the JSON is malformed or of the wrong shape.
    """
    decoded = json.loads(data)
    if decoded is None:
        return IssuesSearchResult()
    obj = _object(decoded, "IssuesSearchResult")
    items = obj.get("items")
    if items is None:
        items = []
    elif not isinstance(items, list):
        raise ValueError(f"json: cannot unmarshal {_kind(items)} into field items of type list")
    return IssuesSearchResult(
        total_count=_int(obj, "total_count"),
        items=[_issue(item) for item in items],
    )


def search_issues(terms: list[str]) -> IssuesSearchResult:
    """Query the issue tracker for the terms.

    Raises SearchError on a non-OK status, OSError on network failure and
    ValueError on an undecodable response.
    """
    try:
        resp = urllib.request.urlopen(search_url(terms))
    except urllib.error.HTTPError as err:
        raise SearchError(f"search query failed: {err.code} {err.reason}") from None
    with resp:
        if resp.status != 200:
            raise SearchError(f"search query failed: {resp.status} {resp.reason}")
        data = resp.read()
    return parse_search_result(data)