import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from booking_data import AuthToken, Booking, BookingPatch, CreatedBooking
from config import PASSWORD, REQUEST_TIMEOUT, USERNAME, generate_url_from_base_url

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}

ModelT = TypeVar("ModelT", bound=BaseModel)


class BookerContractError(AssertionError):
    """
    Base error for responses that break the booking API contract.
    Subclasses AssertionError so the test runner reports a plain failure.
    """


class UnexpectedStatusError(BookerContractError):
    def __init__(self, response: httpx.Response, low: int, high: int):
        self.status_code = response.status_code
        self.low = low
        self.high = high
        expected = str(low) if low == high else f"{low}-{high}"
        message = (
            f"{response.request.method} {response.request.url} returned "
            f"{response.status_code}, expected {expected}: {response.text[:200]!r}"
        )
        super().__init__(message)


class ResponseFieldError(BookerContractError):
    """Raised when a response body is not JSON or misses a required field."""


def open_client(base_url: Optional[str] = None, **kwargs: Any) -> httpx.Client:
    kwargs.setdefault("timeout", REQUEST_TIMEOUT)
    if base_url:
        kwargs["base_url"] = base_url
    return httpx.Client(**kwargs)


def auth_cookie(token: str) -> Dict[str, str]:
    return {"Cookie": f"token={token}"}


def expect_status(response: httpx.Response, low: int = 200, high: Optional[int] = None) -> None:
    high = low if high is None else high
    if not low <= response.status_code <= high:
        raise UnexpectedStatusError(response, low, high)


def parse_body(response: httpx.Response, model: Type[ModelT]) -> ModelT:
    try:
        payload = response.json()
    except ValueError as exc:
        raise ResponseFieldError(
            f"{response.request.url} did not return JSON: {response.text[:200]!r}"
        ) from exc
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ResponseFieldError(
            f"{response.request.url} body does not match {model.__name__}: {exc}"
        ) from exc


def request_token(client: httpx.Client, username: str = USERNAME, password: str = PASSWORD) -> httpx.Response:
    logger.debug("POST /auth as %s", username)
    return client.post(
        generate_url_from_base_url("/auth"),
        headers={"Content-Type": "application/json"},
        json={"username": username, "password": password},
    )


def get_auth_token(client: httpx.Client, username: str = USERNAME, password: str = PASSWORD) -> str:
    response = request_token(client, username, password)
    expect_status(response, 200)
    return parse_body(response, AuthToken).token


def create_booking(client: httpx.Client, booking: Booking) -> int:
    """POST the booking and return the identifier the API assigned to it."""
    logger.debug("POST /booking for %s %s", booking.firstname, booking.lastname)
    response = client.post(
        generate_url_from_base_url("/booking"),
        headers=JSON_HEADERS,
        json=booking.model_dump(),
    )
    expect_status(response, 200, 299)
    booking_id = parse_body(response, CreatedBooking).bookingid
    logger.info("Created booking %s", booking_id)
    return booking_id


def get_booking(client: httpx.Client, booking_id: int) -> httpx.Response:
    logger.debug("GET /booking/%s", booking_id)
    return client.get(
        generate_url_from_base_url(f"/booking/{booking_id}"),
        headers={"Accept": "application/json"},
    )


def partial_update_booking(client: httpx.Client, booking_id: int, token: str, changes: Dict[str, Any]) -> httpx.Response:
    body = BookingPatch(**changes).model_dump(exclude_unset=True)
    logger.debug("PATCH /booking/%s fields=%s", booking_id, sorted(body))
    return client.patch(
        generate_url_from_base_url(f"/booking/{booking_id}"),
        headers={**JSON_HEADERS, **auth_cookie(token)},
        json=body,
    )


def delete_booking(client: httpx.Client, booking_id: int, token: str) -> httpx.Response:
    logger.debug("DELETE /booking/%s", booking_id)
    return client.delete(
        generate_url_from_base_url(f"/booking/{booking_id}"),
        headers=auth_cookie(token),
    )


def ping(client: httpx.Client) -> httpx.Response:
    return client.get(generate_url_from_base_url("/ping"))
