import threading
import urllib.error
import urllib.request
from http.server import ThreadingHTTPServer

import pytest

from primer.params import ParamError
from primer.search import SearchHandler, SearchParams, search


@pytest.mark.parametrize(
    "query,expected",
    [
        ("", "Search: {Labels:[] MaxResults:10 Exact:false}\n"),
        ("l=python&l=programming", "Search: {Labels:[python programming] MaxResults:10 Exact:false}\n"),
        (
            "l=python&l=programming&max=100",
            "Search: {Labels:[python programming] MaxResults:100 Exact:false}\n",
        ),
        (
            "x=true&l=python&l=programming",
            "Search: {Labels:[python programming] MaxResults:10 Exact:true}\n",
        ),
    ],
)
def test_search_outputs(query, expected):
    assert search(query) == expected


@pytest.mark.parametrize(
    "query,message",
    [
        ("q=hello&x=123", 'x: strconv.ParseBool: parsing "123": invalid syntax'),
        ("q=hello&max=lots", 'max: strconv.ParseInt: parsing "lots": invalid syntax'),
    ],
)
def test_search_errors(query, message):
    with pytest.raises(ParamError) as info:
        search(query)
    assert str(info.value) == message


def test_search_accepts_mapping():
    assert search({"max": ["100"]}) == "Search: {Labels:[] MaxResults:100 Exact:false}\n"


def test_params_defaults():
    params = SearchParams()
    assert params.max_results == 10
    assert str(params) == "{Labels:[] MaxResults:10 Exact:false}"


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), SearchHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def _read(url):
    with urllib.request.urlopen(url) as resp:
        return resp.status, resp.read().decode()


def test_handler_ok(base_url):
    query = "l=python&l=programming&max=100"
    status, body = _read(base_url + "/search?" + query)
    assert status == 200
    assert body == search(query)
    assert body == "Search: {Labels:[python programming] MaxResults:100 Exact:false}\n"


def test_handler_bad_request(base_url):
    with pytest.raises(ParamError) as expected:
        search("q=hello&max=lots")
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(base_url + "/search?q=hello&max=lots")
    assert info.value.code == 400
    assert info.value.read().decode() == str(expected.value) + "\n"


def test_handler_unknown_path(base_url):
    status, body = _read(base_url + "/search")
    assert status == 200
    assert body == search("")
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(base_url + "/other")
    assert info.value.code == 404