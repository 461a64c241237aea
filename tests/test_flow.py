from fastapi.testclient import TestClient

from app import create_app

client = TestClient(create_app())

booking_data = {
    "firstname": "Alice",
    "lastname": "Doe",
    "totalprice": 500,
    "depositpaid": True,
    "bookingdates": {"checkin": "2024-12-01", "checkout": "2024-12-10"},
    "additionalneeds": "Lunch",
}


def test_booking_lifecycle():
    # Create booking
    r = client.post("/booking", json=booking_data)
    assert r.status_code == 200
    booking_id = r.json()["bookingid"]
    assert r.json()["booking"] == booking_data

    # Read it back
    r = client.get(f"/booking/{booking_id}")
    assert r.status_code == 200
    assert r.json() == booking_data

    # Token
    r = client.post("/auth", json={"username": "admin", "password": "password123"})
    assert r.status_code == 200
    cookie = {"Cookie": f"token={r.json()['token']}"}

    # Partial update keeps the untouched fields
    r = client.patch(f"/booking/{booking_id}", json={"firstname": "James", "lastname": "Brown"}, headers=cookie)
    assert r.status_code == 200
    assert r.json()["firstname"] == "James"
    assert r.json()["totalprice"] == 500

    # Delete booking
    r = client.delete(f"/booking/{booking_id}", headers=cookie)
    assert r.status_code == 201
    assert r.text == "Created"

    r = client.get(f"/booking/{booking_id}")
    assert r.status_code == 404
    assert r.text == "Not Found"


def test_writes_need_a_token():
    booking_id = client.post("/booking", json=booking_data).json()["bookingid"]

    r = client.patch(f"/booking/{booking_id}", json={"firstname": "James"})
    assert r.status_code == 403

    r = client.delete(f"/booking/{booking_id}", headers={"Cookie": "token=unknown"})
    assert r.status_code == 403

    assert client.get(f"/booking/{booking_id}").json()["firstname"] == "Alice"


def test_unknown_booking():
    token = client.post("/auth", json={"username": "admin", "password": "password123"}).json()["token"]
    cookie = {"Cookie": f"token={token}"}

    assert client.get("/booking/99999").status_code == 404
    assert client.delete("/booking/99999", headers=cookie).status_code == 405


def test_bad_credentials():
    r = client.post("/auth", json={"username": "admin", "password": "nope"})
    assert r.status_code == 200
    assert r.json() == {"reason": "Bad credentials"}


def test_null_field_is_rejected():
    booking_id = client.post("/booking", json=booking_data).json()["bookingid"]
    token = client.post("/auth", json={"username": "admin", "password": "password123"}).json()["token"]

    r = client.patch(f"/booking/{booking_id}", json={"firstname": None}, headers={"Cookie": f"token={token}"})
    assert r.status_code == 400
    assert r.text == "Bad Request"

    assert client.get(f"/booking/{booking_id}").json()["firstname"] == "Alice"
