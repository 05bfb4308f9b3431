# backend/client.py
# HTTP client the Streamlit UI uses to reach the API.

import logging
from typing import Any, List, Optional

import requests

from .config import GUILTED_API_URL, REQUEST_TIMEOUT
from .models import FriendPreferences, GiftIdea, GiftRecipe

logger = logging.getLogger(__name__)


class GuiltedAPIError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


def _unwrap(data: Any, key: str) -> Any:
    # Older servers returned the bare payload instead of the envelope
    if isinstance(data, dict) and key in data:
        return data[key]
    return data


class GuiltedClient:
    def __init__(self, base_url: str = GUILTED_API_URL, timeout: float = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _post(self, path: str, payload: dict) -> Any:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise GuiltedAPIError(f"Request to {path} failed: {e}") from e

        if r.status_code != 200:
            try:
                body = r.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            raise GuiltedAPIError(
                body.get("error") or f"API error: {r.status_code}",
                status_code=r.status_code,
                details=body.get("details"),
            )

        try:
            return r.json()
        except ValueError as e:
            raise GuiltedAPIError(f"API returned a non-JSON body for {path}", status_code=r.status_code) from e

    def generate_ideas(self, prefs: FriendPreferences) -> List[GiftIdea]:
        data = self._post("/api/generate-gifts", {"friendPreferences": prefs.model_dump()})
        items = _unwrap(data, "giftIdeas")
        if not isinstance(items, list):
            raise GuiltedAPIError("API returned gift ideas in an unexpected shape")
        return [GiftIdea.model_validate(it) for it in items]

    def generate_recipe(self, title: str, prefs: FriendPreferences) -> GiftRecipe:
        data = self._post(
            "/api/generate-recipe",
            {"giftTitle": title, "friendPreferences": prefs.model_dump()},
        )
        return GiftRecipe.model_validate(_unwrap(data, "recipe"))
