import email.message
import io
import json
from datetime import datetime, timezone
from unittest import mock
from urllib.error import HTTPError
from urllib.parse import parse_qs, urlsplit

import pytest

from primer.github import (
    ISSUES_URL,
    ZERO_TIME,
    Issue,
    IssuesSearchResult,
    SearchError,
    User,
    parse_search_result,
    search_issues,
    search_url,
)

SAMPLE = {
    "total_count": 13,
    "items": [
        {
            "number": 5680,
            "html_url": "https://issues.example.com/5680",
            "title": "encoding/json: set key converter on en/decoder",
            "state": "open",
            "user": {"login": "alice", "html_url": "https://users.example.com/alice"},
            "created_at": "2013-06-11T10:20:30Z",
            "body": "text",
        }
    ],
}


class _FakeResponse(io.BytesIO):
    def __init__(self, body: bytes, status: int = 200, reason: str = "OK") -> None:
        super().__init__(body)
        self.status = status
        self.reason = reason


def test_search_url_round_trip():
    terms = ["repo:example/project", "is:open", "json", "decoder"]
    url = search_url(terms)
    assert url.startswith(ISSUES_URL + "?q=")
    assert parse_qs(urlsplit(url).query)["q"] == [" ".join(terms)]


def test_search_url_escapes():
    assert search_url(["a b", "c/d"]) == ISSUES_URL + "?q=a+b+c%2Fd"


def test_parse_sample():
    result = parse_search_result(json.dumps(SAMPLE))
    assert result.total_count == 13
    issue = result.items[0]
    assert issue.number == 5680
    assert issue.title == "encoding/json: set key converter on en/decoder"
    assert issue.user == User("alice", "https://users.example.com/alice")
    assert issue.created_at == datetime(2013, 6, 11, 10, 20, 30, tzinfo=timezone.utc)


def test_parse_case_insensitive_keys():
    data = {"TOTAL_COUNT": 3, "Items": [{"Number": 7, "Title": "t", "User": None}]}
    result = parse_search_result(json.dumps(data))
    assert result == IssuesSearchResult(3, [Issue(number=7, title="t")])


def test_parse_missing_fields_default():
    result = parse_search_result(b'{"items": [{}]}')
    assert result.total_count == 0
    assert result.items[0].created_at == ZERO_TIME
    assert result.items[0].user is None


def test_parse_offset_time():
    data = {"items": [{"created_at": "2020-01-02T03:04:05.5+02:00"}]}
    created = parse_search_result(json.dumps(data)).items[0].created_at
    assert created == datetime(2020, 1, 2, 1, 4, 5, 500000, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "text",
    ['{"total_count": "x"}', "[1, 2]", "{bad json", '{"items": [{"number": 1.5}]}'],
)
def test_parse_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_search_result(text)


def test_search_issues_uses_query_url():
    fake = _FakeResponse(json.dumps(SAMPLE).encode())
    with mock.patch("urllib.request.urlopen", return_value=fake) as opener:
        result = search_issues(["json", "decoder"])
    opener.assert_called_once_with(search_url(["json", "decoder"]))
    assert result.total_count == 13
    assert result.items[0].number == 5680


def test_search_issues_http_error():
    err = HTTPError(ISSUES_URL, 403, "Forbidden", email.message.Message(), io.BytesIO(b""))
    with mock.patch("urllib.request.urlopen", side_effect=err):
        with pytest.raises(SearchError, match="^search query failed: 403"):
            search_issues(["x"])


def test_search_issues_non_ok_status():
    fake = _FakeResponse(b"{}", status=202, reason="Accepted")
    with mock.patch("urllib.request.urlopen", return_value=fake):
        with pytest.raises(SearchError, match="search query failed"):
            search_issues(["x"])