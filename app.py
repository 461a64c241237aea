"""
In-process stand-in for the restful-booker API.

Mirrors the status codes and bodies the public service answers with, so the
booking scenarios can run without network access. State lives in memory and
belongs to the app returned by create_app().
"""
import itertools
import secrets
from typing import Any, Dict, Optional

from fastapi import Cookie, FastAPI
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ValidationError

from booking_data import Booking, BookingPatch
from config import PASSWORD, USERNAME


class Credentials(BaseModel):
    username: str
    password: str


def _text(body: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(body, status_code=status_code)


def create_app(username: str = USERNAME, password: str = PASSWORD) -> FastAPI:
    app = FastAPI(title="Fake restful-booker")

    bookings: Dict[int, Dict[str, Any]] = {}
    tokens = set()
    next_id = itertools.count(1)

    def authorized(token: Optional[str]) -> bool:
        return token is not None and token in tokens

    @app.post("/auth")
    def create_token(credentials: Credentials):
        if credentials.username != username or credentials.password != password:
            return {"reason": "Bad credentials"}
        token = secrets.token_hex(8)
        tokens.add(token)
        return {"token": token}

    @app.get("/ping", response_class=PlainTextResponse, status_code=201)
    def health_check():
        return "Created"

    @app.post("/booking")
    def create_booking(booking: Booking):
        booking_id = next(next_id)
        bookings[booking_id] = booking.model_dump()
        return {"bookingid": booking_id, "booking": bookings[booking_id]}

    @app.get("/booking/{booking_id}")
    def get_booking(booking_id: int):
        if booking_id not in bookings:
            return _text("Not Found", 404)
        return bookings[booking_id]

    @app.patch("/booking/{booking_id}")
    def partial_update_booking(booking_id: int, changes: BookingPatch, token: Optional[str] = Cookie(None)):
        if not authorized(token):
            return _text("Forbidden", 403)
        if booking_id not in bookings:
            return _text("Method Not Allowed", 405)
        merged = {**bookings[booking_id], **changes.model_dump(exclude_unset=True)}
        try:
            bookings[booking_id] = Booking.model_validate(merged).model_dump()
        except ValidationError:
            return _text("Bad Request", 400)
        return bookings[booking_id]

    @app.delete("/booking/{booking_id}")
    def delete_booking(booking_id: int, token: Optional[str] = Cookie(None)):
        if not authorized(token):
            return _text("Forbidden", 403)
        if bookings.pop(booking_id, None) is None:
            return _text("Method Not Allowed", 405)
        return _text("Created", 201)

    return app


app = create_app()
