import requests
from typing import List
from .config import BASE_URL, API_KEY, TIMEOUT

TOKENS_URL = f"{BASE_URL.rstrip('/')}/api/tokens"


class ApiError(Exception):
    """Raised when the API call fails; the message is meant for the user."""


def _headers() -> dict:
    return {"x-api-key": API_KEY}


def _error_message(resp: requests.Response, action: str) -> str:
    try:
        message = resp.json().get("message")
    except (ValueError, AttributeError):
        message = None
    return message or f"Failed to {action} (status {resp.status_code})"


def api_create_token(user_id: str, scopes: List[str], expires_in_minutes: int) -> dict:
    """
    Creates a token and returns its public representation.
    """
    data = {"userId": user_id, "scopes": scopes, "expiresInMinutes": expires_in_minutes}

    try:
        resp = requests.post(TOKENS_URL, json=data, headers=_headers(), timeout=TIMEOUT)
    except requests.RequestException as e:
        raise ApiError(f"Network error: {e}") from e

    if resp.status_code != 201:
        raise ApiError(_error_message(resp, "create token"))
    return resp.json()


def api_list_tokens(user_id: str) -> List[dict]:
    """
    Returns the active tokens of a user, newest first.
    """
    try:
        resp = requests.get(TOKENS_URL, params={"userId": user_id}, headers=_headers(), timeout=TIMEOUT)
    except requests.RequestException as e:
        raise ApiError(f"Network error: {e}") from e

    if resp.status_code != 200:
        raise ApiError(_error_message(resp, "fetch tokens"))
    return resp.json()
