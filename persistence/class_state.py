from __future__ import annotations

from datetime import date as Date

from pydantic import BaseModel, Field


class ClassRecord(BaseModel):
    """
    Stored class, keyed by class name:
      {
        "allowed_capacity": 5,
        "start_date": "2025-06-01",
        "end_date": "2025-06-10",
        "bookings": { "2025-06-05": ["john", ...] }
      }
    """

    allowed_capacity: int = Field(gt=0)
    start_date: Date
    end_date: Date
    bookings: dict[Date, list[str]] = Field(default_factory=dict)

    def covers(self, day: Date) -> bool:
        return self.start_date <= day <= self.end_date

    def bookings_on(self, day: Date) -> list[str]:
        return list(self.bookings.get(day, []))

    def is_full_on(self, day: Date) -> bool:
        return len(self.bookings.get(day, [])) >= self.allowed_capacity

    def add_booking(self, day: Date, user_name: str) -> None:
        self.bookings.setdefault(day, []).append(user_name)
