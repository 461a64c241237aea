import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

BASE_URL = os.getenv("BOOKER_BASE_URL", "https://restful-booker.herokuapp.com")

USERNAME = os.getenv("BOOKER_USERNAME", "admin")
PASSWORD = os.getenv("BOOKER_PASSWORD", "password123")

REQUEST_TIMEOUT = float(os.getenv("BOOKER_TIMEOUT", "10"))


def generate_url_from_base_url(path: str, base_url: Optional[str] = None) -> str:
    """Turn a relative API path like ``/booking/1`` into an absolute URL."""
    base = (base_url or BASE_URL).rstrip("/")
    return f"{base}/{path.lstrip('/')}"
