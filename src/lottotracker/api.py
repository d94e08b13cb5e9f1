"""FastAPI adapter exposing entries and the latest draw to a presentation layer."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from . import __version__
from .entries import CheckVariant, EntryCandidate, EntryNotFoundError, EntryRecord, EntryService
from .logging_config import configure_logging
from .results import DrawResult, DrawResultFeed


class CandidatePayload(BaseModel):
    """One ticket line as typed by the user."""

    numbers: str = Field(default="", max_length=200)
    plus: bool = False


class AddEntriesRequest(BaseModel):
    entries: list[CandidatePayload] = Field(default_factory=list, max_length=50)


class ToggleRequest(BaseModel):
    index: int = Field(ge=0, le=5)
    variant: Literal["primary", "secondary"] = "primary"


class EntryResponse(BaseModel):
    id: str
    created_at: str
    numbers: list[int]
    has_plus: bool
    checked: list[bool]
    plus_checked: list[bool]


class DrawResultResponse(BaseModel):
    draw_date: str
    winning_numbers: list[str]
    error_message: str | None = None


configure_logging()

app = FastAPI(title="lottotracker", version=__version__)


@lru_cache(maxsize=1)
def get_entry_service() -> EntryService:
    """Return singleton entry service backed by the in-memory store."""

    return EntryService()


@lru_cache(maxsize=1)
def get_feed() -> DrawResultFeed:
    """Return singleton draw feed."""

    return DrawResultFeed()


def _entry_response(record: EntryRecord) -> EntryResponse:
    return EntryResponse.model_validate(record.as_dict())


def _draw_response(result: DrawResult) -> DrawResultResponse:
    return DrawResultResponse.model_validate(result.as_dict())


@app.get("/api/entries", response_model=list[EntryResponse])
def list_entries() -> list[EntryResponse]:
    return [_entry_response(record) for record in get_entry_service().list()]


@app.post("/api/entries", response_model=list[EntryResponse], status_code=201)
def add_entries(payload: AddEntriesRequest) -> list[EntryResponse]:
    """Validate and store a batch of ticket lines, all or nothing."""

    outcome = get_entry_service().add(
        EntryCandidate(text=item.numbers, has_plus=item.plus) for item in payload.entries
    )
    if outcome.failure is not None:
        raise HTTPException(
            status_code=400,
            detail={
                "code": outcome.failure.code,
                "message": outcome.failure.message,
                "position": outcome.failure.position,
            },
        )
    return [_entry_response(record) for record in outcome.records]


@app.delete("/api/entries", status_code=204)
def delete_all_entries() -> None:
    get_entry_service().delete_all()


@app.delete("/api/entries/{entry_id}", status_code=204)
def delete_entry(entry_id: str) -> None:
    try:
        get_entry_service().delete(entry_id)
    except EntryNotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"entry {entry_id} not found") from exc


@app.post("/api/entries/{entry_id}/toggle", response_model=EntryResponse)
def toggle_entry(entry_id: str, payload: ToggleRequest) -> EntryResponse:
    try:
        record = get_entry_service().toggle(entry_id, payload.index, CheckVariant(payload.variant))
    except EntryNotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"entry {entry_id} not found") from exc
    return _entry_response(record)


@app.get("/api/draw/latest", response_model=DrawResultResponse)
def latest_draw() -> DrawResultResponse:
    return _draw_response(get_feed().latest)


@app.post("/api/draw/refresh", status_code=202)
def refresh_draw() -> dict[str, object]:
    """Trigger an asynchronous refresh; poll /api/draw/latest for the outcome."""

    get_feed().refresh()
    return {"detail": "refresh triggered"}
