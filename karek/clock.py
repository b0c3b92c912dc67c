"""A simple 24-hour clock that advances one second at a time."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Clock:
    """Hours, minutes and seconds of a 24-hour clock."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def tick(self) -> None:
        """Advance by one second, carrying into minutes and hours."""
        self.seconds += 1
        if self.seconds >= 60:
            self.seconds = 0
            self.minutes += 1
        if self.minutes >= 60:
            self.minutes = 0
            self.hours += 1
        if self.hours >= 24:
            self.hours = 0

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"