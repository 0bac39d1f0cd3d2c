from typing import Optional
from unittest.mock import Mock, patch

import pytest
import requests

from saih_rainfall.errors import FetchFailure
from saih_rainfall.services.decoder import decode_rows
from saih_rainfall.services.fetcher import PageFetcher
from saih_rainfall.services.parser import parse_rows
from saih_rainfall.services.provinces import ProvinceDirectory

from .conftest import make_page

URL = "https://example.test/LluviaTabla.aspx"


def _response(
    body: bytes,
    status_code: int = 200,
    content_type: Optional[str] = "text/html; charset=utf-8",
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = "OK" if status_code < 400 else "Service Unavailable"
    resp.url = URL
    resp._content = body
    if content_type is not None:
        resp.headers["Content-Type"] = content_type
    resp.encoding = requests.utils.get_encoding_from_headers(resp.headers)
    return resp


def _page_with_meta(charset: str) -> str:
    page = make_page([["M13 CAÑADA DE CAÑEPLA (AL)", "0,2", "4,6", "5,0", "0", "mm"]])
    return page.replace("<html>", f'<html><head><meta charset="{charset}"></head>', 1)


@patch("requests.Session.get")
def test_fetch_returns_markup(mock_get: Mock) -> None:
    mock_get.return_value = _response(b"<html>ok</html>")
    fetcher = PageFetcher(url=URL, timeout_connect=1.0, timeout_read=2.0)

    assert fetcher.fetch() == "<html>ok</html>"
    assert mock_get.call_count == 1
    args, kwargs = mock_get.call_args
    assert args[0] == URL
    assert kwargs["timeout"] == (1.0, 2.0)
    assert "User-Agent" in kwargs["headers"]


@patch("requests.Session.get")
def test_bare_content_type_uses_meta_charset(mock_get: Mock) -> None:
    # No charset in the header: requests alone would decode this as ISO-8859-1
    mock_get.return_value = _response(_page_with_meta("utf-8").encode("utf-8"), content_type="text/html")

    readings = decode_rows(parse_rows(PageFetcher(url=URL).fetch()), ProvinceDirectory())

    assert readings[0].gauge.name == "CAÑADA DE CAÑEPLA"
    assert readings[0].province.code == "AL"


@patch("requests.Session.get")
def test_bare_content_type_latin1_page(mock_get: Mock) -> None:
    mock_get.return_value = _response(
        _page_with_meta("iso-8859-1").encode("iso-8859-1"), content_type="text/html"
    )
    markup = PageFetcher(url=URL).fetch()
    assert "CAÑADA DE CAÑEPLA" in markup


@patch("requests.Session.get")
def test_header_charset_is_trusted(mock_get: Mock) -> None:
    mock_get.return_value = _response("<p>Jaén</p>".encode("utf-8"), content_type="text/html; charset=UTF-8")
    assert PageFetcher(url=URL).fetch() == "<p>Jaén</p>"


@patch("requests.Session.get")
def test_missing_content_type(mock_get: Mock) -> None:
    mock_get.return_value = _response(_page_with_meta("utf-8").encode("utf-8"), content_type=None)
    assert "CAÑADA DE CAÑEPLA" in PageFetcher(url=URL).fetch()


@patch("requests.Session.get")
def test_fetch_http_error_status(mock_get: Mock) -> None:
    mock_get.return_value = _response(b"down", status_code=503)
    with pytest.raises(FetchFailure) as exc:
        PageFetcher(url=URL).fetch()
    assert exc.value.message == "Failed to load the rainfall page"
    assert mock_get.call_count == 1


@patch("requests.Session.get")
def test_fetch_transport_error_not_retried(mock_get: Mock) -> None:
    mock_get.side_effect = requests.ConnectionError("connection refused")
    with pytest.raises(FetchFailure):
        PageFetcher().fetch()
    assert mock_get.call_count == 1


@patch("requests.Session.get")
def test_fetch_timeout(mock_get: Mock) -> None:
    mock_get.side_effect = requests.Timeout("read timed out")
    with pytest.raises(FetchFailure):
        PageFetcher().fetch()
