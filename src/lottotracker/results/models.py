"""Draw result value published by the results pipeline."""

from __future__ import annotations

from dataclasses import dataclass

DRAW_SIZE = 6
SENTINEL_TOKEN = "?"
SENTINEL_NUMBERS: tuple[str, ...] = (SENTINEL_TOKEN,) * DRAW_SIZE


@dataclass(frozen=True)
class DrawResult:
    """Latest official draw: date label plus six winning-number tokens."""

    draw_date: str = ""
    winning_numbers: tuple[str, ...] = SENTINEL_NUMBERS
    error_message: str | None = None

    def __post_init__(self) -> None:
        numbers = tuple(str(token) for token in self.winning_numbers)
        if len(numbers) != DRAW_SIZE:
            raise ValueError(f"winning_numbers must contain {DRAW_SIZE} tokens.")
        object.__setattr__(self, "winning_numbers", numbers)

    @classmethod
    def sentinel(cls, error_message: str | None = None) -> DrawResult:
        """Placeholder result used when real data cannot be extracted."""
        return cls(draw_date="", winning_numbers=SENTINEL_NUMBERS, error_message=error_message)

    @property
    def is_sentinel(self) -> bool:
        return self.winning_numbers == SENTINEL_NUMBERS

    def as_dict(self) -> dict[str, object]:
        return {
            "draw_date": self.draw_date,
            "winning_numbers": list(self.winning_numbers),
            "error_message": self.error_message,
        }
