"""
Walk one booking through create, read, update and delete against
BOOKER_BASE_URL and record every exchange in validation-output.json.
"""
import json
import logging
import sys

from booker_client import (
    BookerContractError,
    create_booking,
    delete_booking,
    expect_status,
    get_auth_token,
    get_booking,
    open_client,
    partial_update_booking,
)
from booking_data import generate_booking
from config import BASE_URL

OUTPUT_FILE = "validation-output.json"

logger = logging.getLogger("run_flow")


def _decode(content, fallback):
    try:
        return json.loads(content)
    except ValueError:
        return fallback


def _recorder(val):
    # Response hook, so a step is recorded even when its helper raises.
    def record(response):
        response.read()
        request = response.request
        val.append({
            "request": {
                "method": request.method,
                "endpoint": request.url.path,
                "body": _decode(request.content, None) if request.content else None,
            },
            "status_code": response.status_code,
            "response": _decode(response.content, response.text),
        })
    return record


def run_flow(val, **client_options):
    booking = generate_booking()
    client_options["event_hooks"] = {"response": [_recorder(val)]}

    with open_client(**client_options) as client:
        booking_id = create_booking(client, booking)

        r = get_booking(client, booking_id)
        expect_status(r, 200, 299)

        token = get_auth_token(client)

        r = partial_update_booking(client, booking_id, token, {"firstname": "James", "lastname": "Brown"})
        expect_status(r, 200, 299)

        r = delete_booking(client, booking_id, token)
        expect_status(r, 200, 299)

        r = get_booking(client, booking_id)
        expect_status(r, 404)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Running booking flow against %s", BASE_URL)
    steps = []
    try:
        run_flow(steps)
    except BookerContractError as exc:
        logger.error("Flow failed: %s", exc)
        sys.exit(1)
    finally:
        with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
            json.dump(steps, f, indent=2)
    print(f"Validation complete. See {OUTPUT_FILE}")
