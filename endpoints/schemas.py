from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

CLASS_CREATED_MESSAGE = "Class created successfully"
BOOKING_CREATED_MESSAGE = "Class booked successfully"
UNMARSHALLING_MESSAGE = "error while unmarshalling"


class CreateClassRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(alias="className", min_length=1)
    # Strict: "5" or true is a bind failure, not a coerced int.
    class_capacity: int = Field(alias="classCapacity", gt=0, strict=True)
    start_date: str = Field(alias="startDate", min_length=1)
    end_date: str = Field(alias="endDate", min_length=1)


class CreateBookingRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(alias="className", min_length=1)
    user_name: str = Field(alias="userName", min_length=1)
    # Not required at bind time; an empty value fails date parsing instead.
    booking_date: str = Field(default="", alias="bookingDate")


class ResponseEnvelope(BaseModel):
    success: bool
    message: str
    data: str | None = None

    @classmethod
    def ok(cls, message: str, data: str | None = None) -> "ResponseEnvelope":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str) -> "ResponseEnvelope":
        return cls(success=False, message=message)

    def to_json(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)
