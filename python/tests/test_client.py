"""HTTP trivia client: parsing, normalization and error mapping."""

from __future__ import annotations

from unittest import mock

import pytest
import requests

from jeopardy.backend.engine.datasource import JServiceClient
from jeopardy.backend.engine.datasource.client import clean_text, parse_detail
from jeopardy.backend.errors import DataSourceError


def _response(payload=None, status: int = 200, bad_json: bool = False) -> mock.Mock:
    resp = mock.Mock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    else:
        resp.raise_for_status.return_value = None
    if bad_json:
        resp.json.side_effect = ValueError("no JSON")
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def http_get():
    with mock.patch("jeopardy.backend.engine.datasource.client.requests.get") as get:
        yield get


# -- list_categories ----------------------------------------------------------


def test_list_categories_requests_pool(http_get) -> None:
    http_get.return_value = _response(
        [
            {"id": 11, "title": "science", "clues_count": 5},
            {"id": 12, "title": "potent potables", "clues_count": 10},
        ]
    )
    client = JServiceClient("http://trivia.test/api/", timeout=3.0)

    pool = client.list_categories(100)

    http_get.assert_called_once_with(
        "http://trivia.test/api/categories", params={"count": 100}, timeout=3.0
    )
    assert [(c.id, c.title, c.clue_count) for c in pool] == [
        (11, "science", 5),
        (12, "potent potables", 10),
    ]


def test_list_categories_accepts_camel_case_count(http_get) -> None:
    http_get.return_value = _response([{"id": 1, "title": "x", "clueCount": 7}])
    assert JServiceClient().list_categories(1)[0].clue_count == 7


def test_list_categories_rejects_missing_title(http_get) -> None:
    http_get.return_value = _response([{"id": 1, "clues_count": 5}])
    with pytest.raises(DataSourceError):
        JServiceClient().list_categories(1)


def test_list_categories_rejects_non_list(http_get) -> None:
    http_get.return_value = _response({"error": "nope"})
    with pytest.raises(DataSourceError):
        JServiceClient().list_categories(100)


# -- get_category -------------------------------------------------------------


def test_get_category_normalizes_clues(http_get) -> None:
    http_get.return_value = _response(
        {
            "id": 42,
            "title": "books &amp; authors",
            "clues_count": 2,
            "clues": [
                {"id": 1, "question": "Wrote  <i>Hamlet</i>", "answer": "<i>Shakespeare</i>"},
                {"id": 2, "question": "2 + 2", "answer": 4},
            ],
        }
    )

    detail = JServiceClient().get_category(42)

    assert http_get.call_args.kwargs["params"] == {"id": 42}
    assert detail.title == "books & authors"
    assert [(c.question, c.answer) for c in detail.clues] == [
        ("Wrote Hamlet", "Shakespeare"),
        ("2 + 2", "4"),
    ]


def test_get_category_missing_clues_is_malformed(http_get) -> None:
    http_get.return_value = _response({"id": 42, "title": "x"})
    with pytest.raises(DataSourceError):
        JServiceClient().get_category(42)


# -- failures -----------------------------------------------------------------


def test_transport_error_becomes_data_source_error(http_get) -> None:
    http_get.side_effect = requests.ConnectionError("refused")
    with pytest.raises(DataSourceError) as info:
        JServiceClient().list_categories(100)
    assert isinstance(info.value.__cause__, requests.ConnectionError)


def test_http_status_error_becomes_data_source_error(http_get) -> None:
    http_get.return_value = _response(status=503)
    with pytest.raises(DataSourceError):
        JServiceClient().get_category(1)


def test_invalid_json_becomes_data_source_error(http_get) -> None:
    http_get.return_value = _response(bad_json=True)
    with pytest.raises(DataSourceError):
        JServiceClient().list_categories(100)


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "no id", "clues": []},
        {"id": 1, "clues": []},
        {"id": "abc", "title": "bad id", "clues": []},
        {"id": True, "title": "bool id", "clues": []},
        {"id": 1, "title": "bad clue", "clues": ["not a dict"]},
        {"id": 1, "title": "clues not list", "clues": "nope"},
        ["not", "a", "dict"],
    ],
)
def test_parse_detail_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(DataSourceError):
        parse_detail(payload)


def test_clean_text_handles_none_and_markup() -> None:
    assert clean_text(None) == ""
    assert clean_text("  a <b>bold</b>\n move ") == "a bold move"
