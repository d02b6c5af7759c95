from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from bs4 import BeautifulSoup, Tag
from pydantic import BaseModel, ValidationError

from travel_search.exceptions.custom import ElementParseError

logger = logging.getLogger(__name__)

Q = TypeVar("Q", bound=BaseModel)
R = TypeVar("R", bound=BaseModel)


def text_of(node: Tag | None, selector: str) -> str:
    """Stripped text of the first match under ``node``, or "" when absent."""
    if node is None:
        return ""
    found = node.select_one(selector)
    return found.get_text(strip=True) if found else ""


def build_record(model: type[R], **fields) -> R:
    try:
        return model(**fields)
    except ValidationError as exc:
        raise ElementParseError(
            f"{model.__name__} validation failed: {exc.error_count()} error(s)"
        ) from exc


class SourceAdapter(ABC, Generic[Q, R]):
    """One external site: how to address it and how to read its result cards.

    Subclasses set ``name`` and ``card_selector`` and implement ``build_url``,
    ``parse_card`` and ``is_usable``. ``parse`` never raises for a bad card.
    """

    name: str = ""
    card_selector: str = ""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    @abstractmethod
    def build_url(self, query: Q) -> str: ...

    @abstractmethod
    def parse_card(self, card: Tag, query: Q) -> R: ...

    @abstractmethod
    def is_usable(self, record: R) -> bool:
        """Quality gate: identifying name present and price above zero."""

    def parse(self, html: str, query: Q) -> list[R]:
        soup = BeautifulSoup(html, "html.parser")
        records: list[R] = []

        for index, card in enumerate(soup.select(self.card_selector)):
            try:
                record = self.parse_card(card, query)
            except ElementParseError as exc:
                logger.warning("Skipping %s card #%d: %s", self.name, index, exc.message)
                continue
            except Exception:
                logger.exception("Unexpected error parsing %s card #%d", self.name, index)
                continue

            if self.is_usable(record):
                records.append(record)

        return records
