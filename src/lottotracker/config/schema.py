"""Pydantic schema for the results-page selector contract."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PageSelectors(BaseModel):
    """CSS selectors describing where the draw result lives on the page.

    ``date`` and ``number`` are evaluated inside the element matched by
    ``container``. Bump ``version`` whenever the page markup changes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: str = Field(default="2025.02")
    container: str = Field(default="div.wynik_lotto")
    date: str = Field(default="div.date")
    number: str = Field(default="span.number")

    @field_validator("version", "container", "date", "number")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("selector fields must not be blank.")
        return stripped
