import json

import pytest
from fastapi.testclient import TestClient

from backend.api import create_app
from backend.models import FriendPreferences


PREFERENCES = {
    "interests": "baking, hiking, indie music",
    "loveLanguage": "Quality Time",
    "budget": "$40",
    "occasion": "Birthday",
    "gifterPreferences": "I like painting and sewing",
    "timeAvailable": "two weekends",
    "giftType": "solo",
}

IDEAS = [
    {"id": 1, "title": "Trail Mix Jar", "description": "Homemade trail mix in a painted jar"},
    {"id": 2, "title": "Mixtape Zine", "description": "A hand-bound zine of favourite songs"},
    {"id": 3, "title": "Baking Day Voucher", "description": "A sewn apron plus a day of baking together"},
]

RECIPE = {
    "title": "Trail Mix Jar",
    "description": "A painted jar full of homemade trail mix.",
    "estimatedPrice": "$25",
    "estimatedDuration": "3 hours",
    "materials": ["Mason jar", "Acrylic paint", "Nuts and dried fruit"],
    "steps": ["Paint the jar", "Mix the ingredients", "Fill and seal the jar"],
}


class FakeGenerator:
    """Stands in for the model: records prompts and replays canned replies."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def preferences():
    return FriendPreferences(**PREFERENCES)


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def client(fake_generator):
    return TestClient(create_app(generate=fake_generator))


def fenced(payload) -> str:
    return "```json\n" + json.dumps(payload) + "\n```"
