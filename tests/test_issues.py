import email.message
import io
import json
from datetime import datetime, timedelta, timezone
from unittest import mock
from urllib.error import HTTPError

from primer.github import Issue, IssuesSearchResult, User
from primer.issues import (
    days_ago,
    format_table,
    html_main,
    main,
    render_autoescape,
    render_html,
    render_report,
    report_main,
)

CREATED = datetime(2013, 6, 11, 10, 20, 30, tzinfo=timezone.utc)


def _result() -> IssuesSearchResult:
    return IssuesSearchResult(
        13,
        [
            Issue(
                number=5680,
                html_url="https://issues.example.com/5680",
                title="encoding/json: set key converter on en/decoder",
                state="open",
                user=User("eaigner", "https://users.example.com/eaigner"),
                created_at=CREATED,
            ),
            Issue(
                number=6050,
                html_url="https://issues.example.com/6050",
                title="encoding/json: provide tokenizer",
                state="open",
                user=User("gopherbot", "https://users.example.com/gopherbot"),
                created_at=CREATED,
            ),
        ],
    )


class _FakeResponse(io.BytesIO):
    status = 200
    reason = "OK"


def test_days_ago_truncates():
    assert days_ago(CREATED, CREATED + timedelta(days=750, hours=23)) == 750
    assert days_ago(CREATED, CREATED) == 0


def test_format_table_matches_sample_output():
    assert format_table(_result()) == (
        "13 issues:\n"
        "#5680    eaigner encoding/json: set key converter on en/decoder\n"
        "#6050  gopherbot encoding/json: provide tokenizer\n"
    )


def test_format_table_truncates_fields():
    result = IssuesSearchResult(1, [Issue(number=1, title="x" * 100, user=User("u" * 20))])
    line = format_table(result).splitlines()[1]
    assert line.endswith(" " + "x" * 55)
    assert "u" * 9 in line and "u" * 10 not in line


def test_render_html_escapes_values():
    result = _result()
    result.items[0].title = "<script>"
    page = render_html(result)
    assert "<h1>13 issues</h1>" in page
    assert "<script>" not in page
    assert "&lt;script&gt;" in page
    assert "href='https://users.example.com/gopherbot'" in page
    assert page.count("<tr>") == 2


def test_render_html_blocks_unsafe_url():
    result = _result()
    result.items[0].html_url = "javascript:alert(1)"
    assert "javascript:" not in render_html(result)


def test_render_report():
    now = CREATED + timedelta(days=750, hours=3)
    report = render_report(_result(), now)
    assert report.startswith("13 issues:\n----------------------------------------\nNumber: 5680\n")
    assert "User:   eaigner\n" in report
    assert "Title:  encoding/json: set key converter on en/decoder\n" in report
    assert report.count("Age:    750 days\n") == 2


def test_render_report_truncates_title():
    result = IssuesSearchResult(1, [Issue(title="y" * 80, created_at=CREATED)])
    report = render_report(result, CREATED)
    assert "Title:  " + "y" * 64 + "\n" in report


def test_render_autoescape():
    assert render_autoescape() == "<p>A: &lt;b&gt;Hello!&lt;/b&gt;</p><p>B: <b>Hello!</b></p>"


def _payload() -> bytes:
    return json.dumps(
        {
            "total_count": 13,
            "items": [
                {
                    "number": 5680,
                    "title": "encoding/json: set key converter on en/decoder",
                    "user": {"login": "eaigner"},
                    "created_at": "2013-06-11T10:20:30Z",
                }
            ],
        }
    ).encode()


def test_main_prints_table(capsys):
    with mock.patch("urllib.request.urlopen", return_value=_FakeResponse(_payload())):
        assert main(["json", "decoder"]) == 0
    out = capsys.readouterr().out
    assert out == "13 issues:\n#5680    eaigner encoding/json: set key converter on en/decoder\n"


def test_html_and_report_main(capsys):
    with mock.patch("urllib.request.urlopen", side_effect=lambda url: _FakeResponse(_payload())):
        assert html_main(["json"]) == 0
        assert "<h1>13 issues</h1>" in capsys.readouterr().out
        assert report_main(["json"]) == 0
        assert "Number: 5680\n" in capsys.readouterr().out


def test_main_reports_failure(capsys):
    err = HTTPError("https://api.example.com", 503, "Unavailable", email.message.Message(), io.BytesIO())
    with mock.patch("urllib.request.urlopen", side_effect=err):
        assert main(["x"]) == 1
    assert "search query failed" in capsys.readouterr().err