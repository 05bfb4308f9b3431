# backend/session.py
# View state for the Streamlit page. Works on any mutable mapping so it can be
# driven by st.session_state in the app and by a plain dict in tests.

import logging
from typing import Any, MutableMapping, Optional

from .models import FriendPreferences, GiftIdea

logger = logging.getLogger(__name__)

IDLE = "idle"
LOADING = "loading"
SUCCESS = "success"
ERROR = "error"

State = MutableMapping[str, Any]


_DEFAULTS = {
    "preferences": None,
    "gift_ideas": [],
    "selected_gift": None,
    "recipe": None,
    "ideas_status": IDLE,
    "recipe_status": IDLE,
    "last_error": "",
}


def init_state(state: State) -> None:
    for k, v in _DEFAULTS.items():
        if k not in state:
            state[k] = list(v) if isinstance(v, list) else v


def is_busy(state: State) -> bool:
    return state.get("ideas_status") == LOADING or state.get("recipe_status") == LOADING


def submit_preferences(state: State, prefs: FriendPreferences, client) -> None:
    """Stores the preferences and asks for a fresh set of ideas, dropping any earlier selection."""
    state["preferences"] = prefs
    state["gift_ideas"] = []
    state["selected_gift"] = None
    state["recipe"] = None
    state["recipe_status"] = IDLE
    state["last_error"] = ""
    state["ideas_status"] = LOADING

    try:
        state["gift_ideas"] = client.generate_ideas(prefs)
        state["ideas_status"] = SUCCESS
    except Exception as e:
        logger.error("Error generating gift ideas: %s", e, exc_info=True)
        state["last_error"] = str(e) or "Failed to generate gift ideas."
        state["ideas_status"] = ERROR


def regenerate(state: State, client) -> None:
    prefs: Optional[FriendPreferences] = state.get("preferences")
    if prefs is None:
        raise ValueError("Nothing to regenerate: no preferences have been submitted yet")
    submit_preferences(state, prefs, client)


def select_gift(state: State, gift: GiftIdea, client) -> None:
    prefs: Optional[FriendPreferences] = state.get("preferences")
    if prefs is None:
        raise ValueError("Cannot request a recipe before preferences have been submitted")

    state["selected_gift"] = gift
    state["recipe"] = None
    state["last_error"] = ""
    state["recipe_status"] = LOADING

    try:
        state["recipe"] = client.generate_recipe(gift.title, prefs)
        state["recipe_status"] = SUCCESS
    except Exception as e:
        logger.error("Error generating gift recipe: %s", e, exc_info=True)
        state["last_error"] = str(e) or "Failed to generate recipe."
        state["recipe_status"] = ERROR


def back_to_ideas(state: State) -> None:
    state["selected_gift"] = None
    state["recipe"] = None
    state["recipe_status"] = IDLE
    state["last_error"] = ""


def clear(state: State) -> None:
    for k in _DEFAULTS:
        if k in state:
            del state[k]
    init_state(state)
