"""Trivia data source: the jService-style HTTP API and its wire shapes."""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Protocol

import requests

from jeopardy.backend.errors import DataSourceError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://jservice.io/api"

_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class CategorySummary:
    id: int
    title: str
    clue_count: int


@dataclass(frozen=True)
class RawClue:
    id: int
    question: str
    answer: str


@dataclass(frozen=True)
class CategoryDetail:
    id: int
    title: str
    clues: list[RawClue] = field(default_factory=list)


class TriviaSource(Protocol):
    """The two read operations the board builder needs."""

    def list_categories(self, pool_size: int) -> list[CategorySummary]: ...

    def get_category(self, category_id: int) -> CategoryDetail: ...


def clean_text(value: Any) -> str:
    """Strip markup from API text: ``<i>Hamlet</i>`` -> ``Hamlet``."""
    if value is None:
        return ""
    text = html.unescape(_TAG_RE.sub("", str(value)))
    return _WS_RE.sub(" ", text).strip()


# -- response parsing ---------------------------------------------------------


def _require(data: dict[str, Any], key: str, what: str) -> Any:
    if key not in data or data[key] is None:
        raise DataSourceError(f"Malformed {what}: missing '{key}'.")
    return data[key]


def _as_int(value: Any, what: str) -> int:
    # bool is an int subclass; an id of True is still malformed.
    if isinstance(value, bool):
        raise DataSourceError(f"Malformed {what}: expected an integer, got {value!r}.")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise DataSourceError(
            f"Malformed {what}: expected an integer, got {value!r}."
        ) from exc


def parse_summary(data: Any) -> CategorySummary:
    if not isinstance(data, dict):
        raise DataSourceError(f"Malformed category summary: {data!r}")
    count = data.get("clues_count", data.get("clueCount"))
    if count is None:
        count = len(data.get("clues") or [])
    return CategorySummary(
        id=_as_int(_require(data, "id", "category summary"), "category id"),
        title=clean_text(_require(data, "title", "category summary")),
        clue_count=_as_int(count, "clue count"),
    )


def parse_clue(data: Any) -> RawClue:
    if not isinstance(data, dict):
        raise DataSourceError(f"Malformed clue: {data!r}")
    return RawClue(
        id=_as_int(_require(data, "id", "clue"), "clue id"),
        question=clean_text(data.get("question")),
        answer=clean_text(data.get("answer")),
    )


def parse_detail(data: Any) -> CategoryDetail:
    if not isinstance(data, dict):
        raise DataSourceError(f"Malformed category: {data!r}")
    clues = _require(data, "clues", "category")
    if not isinstance(clues, list):
        raise DataSourceError(f"Malformed category: 'clues' is {type(clues).__name__}.")
    return CategoryDetail(
        id=_as_int(_require(data, "id", "category"), "category id"),
        title=clean_text(_require(data, "title", "category")),
        clues=[parse_clue(c) for c in clues],
    )


# -- HTTP client --------------------------------------------------------------


class JServiceClient:
    """Reads categories and clues from a jService-compatible API.

    Every failure, whether transport, HTTP status or payload shape, is
    raised as :class:`DataSourceError` with the cause chained.  Responses
    are never cached.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str, params: dict[str, Any]) -> Any:
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s %s", url, params)
        try:
            resp = requests.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as exc:
            raise DataSourceError(f"Request to {url} failed: {exc}") from exc
        except ValueError as exc:
            raise DataSourceError(f"Response from {url} is not valid JSON.") from exc

    def list_categories(self, pool_size: int) -> list[CategorySummary]:
        data = self._get("categories", {"count": pool_size})
        if not isinstance(data, list):
            raise DataSourceError(
                f"Expected a list of categories, got {type(data).__name__}."
            )
        return [parse_summary(item) for item in data]

    def get_category(self, category_id: int) -> CategoryDetail:
        return parse_detail(self._get("category", {"id": category_id}))
