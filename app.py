# app.py
# Guilted: centered preference form, gift idea cards, and a recipe view.
# Talks to the FastAPI backend over HTTP (see backend/api.py).

from typing import List

import streamlit as st
from pydantic import ValidationError

from backend import session
from backend.client import GuiltedClient
from backend.config import GIFT_TYPES, LOVE_LANGUAGES
from backend.models import FriendPreferences, GiftIdea, GiftRecipe


st.set_page_config(page_title="Guilted", page_icon="🎁", layout="wide")


@st.cache_resource
def _client() -> GuiltedClient:
    return GuiltedClient()


def _init_form_state() -> None:
    defaults = {
        "interests": "",
        "love_languages": [],
        "budget": "",
        "occasion": "",
        "gifter_preferences": "",
        "time_available": "",
        "gift_type": "solo",
    }
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


def _preferences_from_form() -> FriendPreferences:
    return FriendPreferences(
        interests=st.session_state.get("interests", ""),
        loveLanguage=list(st.session_state.get("love_languages", [])),
        budget=st.session_state.get("budget", ""),
        occasion=st.session_state.get("occasion", ""),
        gifterPreferences=st.session_state.get("gifter_preferences", ""),
        timeAvailable=st.session_state.get("time_available", ""),
        giftType=st.session_state.get("gift_type", "solo"),
    )


def _invalid_fields(e: ValidationError) -> str:
    return ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])


def _render_ideas(ideas: List[GiftIdea]) -> None:
    if not ideas:
        return

    st.subheader("Gift ideas")
    cols = st.columns(min(len(ideas), 3))
    for idx, idea in enumerate(ideas):
        with cols[idx % len(cols)]:
            with st.container(border=True):
                st.markdown(f"**🎁 {idea.title}**")
                st.caption(idea.description)
                if st.button(
                    "View Recipe",
                    key=f"recipe_{idx}_{idea.id}",
                    use_container_width=True,
                    disabled=session.is_busy(st.session_state),
                ):
                    with st.spinner("Generating recipe..."):
                        session.select_gift(st.session_state, idea, _client())
                    st.rerun()


def _render_recipe(recipe: GiftRecipe) -> None:
    with st.container(border=True):
        st.header(recipe.title)
        if recipe.description:
            st.write(recipe.description)
        st.write(f"💲 {recipe.estimatedPrice}  •  🕒 {recipe.estimatedDuration}")

        st.subheader("Materials Needed")
        st.markdown("\n".join(f"- {m}" for m in recipe.materials))

        st.subheader("Step-by-Step Instructions")
        st.markdown("\n".join(f"{i}. {s}" for i, s in enumerate(recipe.steps, start=1)))


session.init_state(st.session_state)
_init_form_state()

st.title("🎁 Guilted")
st.caption("Find personalized, creative, and homemade gift ideas for your friends")

left, center, right = st.columns([1, 2, 1])

with center:
    if st.session_state["selected_gift"] is None:
        st.subheader("Friend's Preferences")

        with st.form("preferences_form", clear_on_submit=False):
            st.text_area(
                "Interests & Hobbies",
                key="interests",
                placeholder="What does your friend enjoy? (e.g., cooking, reading, hiking, art)",
            )
            st.multiselect("Love Language", LOVE_LANGUAGES, key="love_languages")
            st.text_input("Budget", key="budget", placeholder="e.g., $20, $50, $100")
            st.text_input("Occasion", key="occasion", placeholder="Birthday, anniversary, farewell...")
            st.text_input(
                "Your Preferences",
                key="gifter_preferences",
                placeholder="What do you enjoy making? (e.g., baking, knitting, scrapbooking)",
            )
            st.text_input("Time Available", key="time_available", placeholder="e.g., one evening, two weekends")
            st.radio("Gift Type", GIFT_TYPES, key="gift_type", horizontal=True)

            col_a, col_b = st.columns(2)
            with col_a:
                generate_clicked = st.form_submit_button(
                    "Generate Gift Ideas",
                    use_container_width=True,
                    disabled=session.is_busy(st.session_state),
                )
            with col_b:
                clear_clicked = st.form_submit_button("Clear results", use_container_width=True)

        if clear_clicked:
            session.clear(st.session_state)
            st.rerun()

        if generate_clicked:
            try:
                prefs = _preferences_from_form()
            except ValidationError as e:
                st.error(f"Please fill in: {_invalid_fields(e)}")
            else:
                with st.spinner("Generating gift ideas..."):
                    session.submit_preferences(st.session_state, prefs, _client())
                st.rerun()

        if st.session_state["ideas_status"] == session.ERROR:
            st.error("Could not generate gift ideas. Please try again.")

        _render_ideas(st.session_state["gift_ideas"])

        if st.session_state["preferences"] is not None and st.session_state["ideas_status"] != session.LOADING:
            if st.button("Regenerate ideas", disabled=session.is_busy(st.session_state)):
                with st.spinner("Generating gift ideas..."):
                    session.regenerate(st.session_state, _client())
                st.rerun()
    else:
        if st.button("← Back to gift ideas"):
            session.back_to_ideas(st.session_state)
            st.rerun()

        recipe = st.session_state["recipe"]
        if recipe is not None:
            _render_recipe(recipe)
        elif st.session_state["recipe_status"] == session.ERROR:
            st.error("Could not generate the recipe. Go back and try again.")
