"""Extract the latest draw from the results page markup."""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup

from lottotracker.config import PageSelectors, load_selectors

from .models import DRAW_SIZE, DrawResult

logger = logging.getLogger(__name__)


class ResultParser:
    """Parse results-page HTML into a :class:`DrawResult`.

    The page is third-party markup that can change without notice, so every
    failure degrades to the sentinel result instead of raising.
    """

    def __init__(self, selectors: PageSelectors | None = None) -> None:
        self.selectors = selectors or PageSelectors()

    @classmethod
    def from_config(cls, path: str | Path) -> ResultParser:
        return cls(load_selectors(path))

    def parse(self, raw_text: str) -> DrawResult:
        try:
            soup = BeautifulSoup(raw_text, "html.parser")
            container = soup.select_one(self.selectors.container)
            if container is None:
                logger.warning(
                    "Results container %r not found (selectors v%s)",
                    self.selectors.container,
                    self.selectors.version,
                )
                return DrawResult.sentinel(
                    f"Nie znaleziono wyników na stronie ({self.selectors.container})"
                )

            date_element = container.select_one(self.selectors.date)
            draw_date = date_element.get_text(" ", strip=True) if date_element is not None else ""

            numbers = [
                element.get_text(strip=True) for element in container.select(self.selectors.number)
            ]
            numbers = [token for token in numbers if token]
        except Exception as exc:  # noqa: BLE001
            logger.warning("Failed to parse results page: %s", exc)
            return DrawResult.sentinel(f"Błąd parsowania: {exc}")

        if len(numbers) != DRAW_SIZE:
            logger.warning("Expected %d winning numbers, found %d", DRAW_SIZE, len(numbers))
            return DrawResult(
                draw_date=draw_date,
                error_message=f"Znaleziono {len(numbers)} liczb zamiast {DRAW_SIZE}",
            )

        return DrawResult(draw_date=draw_date, winning_numbers=tuple(numbers))
