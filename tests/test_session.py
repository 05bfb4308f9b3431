import pytest

from backend import session
from backend.client import GuiltedAPIError
from backend.models import GiftIdea, GiftRecipe
from conftest import IDEAS, RECIPE


class FakeClient:
    def __init__(self):
        self.idea_calls = []
        self.recipe_calls = []
        self.fail_next = None

    def generate_ideas(self, prefs):
        self.idea_calls.append(prefs)
        if self.fail_next:
            err, self.fail_next = self.fail_next, None
            raise err
        # A fresh batch each time so regenerations are distinguishable
        offset = len(self.idea_calls) * 10
        return [GiftIdea(**{**it, "id": it["id"] + offset}) for it in IDEAS]

    def generate_recipe(self, title, prefs):
        self.recipe_calls.append((title, prefs))
        if self.fail_next:
            err, self.fail_next = self.fail_next, None
            raise err
        return GiftRecipe(**{**RECIPE, "title": title})


@pytest.fixture
def state():
    s = {}
    session.init_state(s)
    return s


@pytest.fixture
def api():
    return FakeClient()


def test_init_state_defaults(state):
    assert state["ideas_status"] == session.IDLE
    assert state["gift_ideas"] == []
    assert state["selected_gift"] is None
    assert not session.is_busy(state)


def test_init_state_keeps_existing_values():
    s = {"ideas_status": session.SUCCESS}
    session.init_state(s)
    assert s["ideas_status"] == session.SUCCESS


def test_submit_preferences(state, api, preferences):
    session.submit_preferences(state, preferences, api)
    assert state["ideas_status"] == session.SUCCESS
    assert len(state["gift_ideas"]) == 3
    assert state["preferences"] == preferences


def test_submit_failure_clears_loading(state, api, preferences):
    api.fail_next = GuiltedAPIError("Failed to generate gift ideas", status_code=500)
    session.submit_preferences(state, preferences, api)
    assert state["ideas_status"] == session.ERROR
    assert state["gift_ideas"] == []
    assert state["last_error"] == "Failed to generate gift ideas"
    assert not session.is_busy(state)


def test_select_gift_loads_recipe(state, api, preferences):
    session.submit_preferences(state, preferences, api)
    gift = state["gift_ideas"][0]
    session.select_gift(state, gift, api)
    assert state["selected_gift"] == gift
    assert state["recipe"].title == gift.title
    assert api.recipe_calls == [(gift.title, preferences)]


def test_select_gift_failure(state, api, preferences):
    session.submit_preferences(state, preferences, api)
    api.fail_next = GuiltedAPIError("Failed to generate gift recipe", status_code=500)
    session.select_gift(state, state["gift_ideas"][0], api)
    assert state["recipe"] is None
    assert state["recipe_status"] == session.ERROR
    assert not session.is_busy(state)


def test_select_gift_needs_preferences(state, api):
    with pytest.raises(ValueError):
        session.select_gift(state, GiftIdea(**IDEAS[0]), api)


def test_regenerate_issues_new_request_and_resets_selection(state, api, preferences):
    session.submit_preferences(state, preferences, api)
    first_batch = state["gift_ideas"]
    session.select_gift(state, first_batch[0], api)

    session.regenerate(state, api)

    assert len(api.idea_calls) == 2
    assert api.idea_calls[1] == preferences
    assert state["gift_ideas"] != first_batch
    assert state["selected_gift"] is None
    assert state["recipe"] is None
    assert state["recipe_status"] == session.IDLE


def test_regenerate_without_preferences(state, api):
    with pytest.raises(ValueError):
        session.regenerate(state, api)


def test_back_to_ideas_keeps_ideas(state, api, preferences):
    session.submit_preferences(state, preferences, api)
    session.select_gift(state, state["gift_ideas"][1], api)
    session.back_to_ideas(state)
    assert state["selected_gift"] is None
    assert state["recipe"] is None
    assert len(state["gift_ideas"]) == 3


def test_clear(state, api, preferences):
    session.submit_preferences(state, preferences, api)
    state["other"] = "kept"
    session.clear(state)
    assert state["preferences"] is None
    assert state["gift_ideas"] == []
    assert state["other"] == "kept"
