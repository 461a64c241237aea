from datetime import date
from typing import Optional

from faker import Faker
from pydantic import BaseModel, ConfigDict, Field, model_validator

ADDITIONAL_NEEDS = ("Breakfast", "Lunch", "Dinner", "None")

CHECKIN = "2024-12-01"
CHECKOUT = "2024-12-10"

MIN_PRICE = 100
MAX_PRICE = 1000


class BookingDates(BaseModel):
    checkin: str
    checkout: str

    @model_validator(mode="after")
    def checkout_after_checkin(self):
        if date.fromisoformat(self.checkout) <= date.fromisoformat(self.checkin):
            raise ValueError("checkout must be after checkin")
        return self


class Booking(BaseModel):
    firstname: str
    lastname: str
    totalprice: int
    depositpaid: bool
    bookingdates: BookingDates
    additionalneeds: Optional[str] = None


class BookingPatch(BaseModel):
    """Partial booking body; only the fields that were set are sent."""
    model_config = ConfigDict(extra="forbid")

    firstname: Optional[str] = None
    lastname: Optional[str] = None
    totalprice: Optional[int] = None
    depositpaid: Optional[bool] = None
    bookingdates: Optional[BookingDates] = None
    additionalneeds: Optional[str] = None


class CreatedBooking(BaseModel):
    # Only the id is part of the contract; the echoed booking is not checked.
    bookingid: int


class AuthToken(BaseModel):
    token: str = Field(min_length=1)


def generate_booking(faker: Optional[Faker] = None) -> Booking:
    """
    Build a valid booking with random names, price and additional needs.
    Dates and the deposit flag are fixed.
    """
    faker = faker or Faker()
    return Booking(
        firstname=faker.first_name(),
        lastname=faker.last_name(),
        totalprice=faker.random_int(min=MIN_PRICE, max=MAX_PRICE),
        depositpaid=True,
        bookingdates=BookingDates(checkin=CHECKIN, checkout=CHECKOUT),
        additionalneeds=faker.random_element(ADDITIONAL_NEEDS),
    )
