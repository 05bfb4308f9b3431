import json
import logging
from typing import Any, List

from pydantic import ValidationError

from .config import IDEA_COUNT
from .llm import GenerateFn
from .models import FriendPreferences, GiftIdea, GiftRecipe
from .prompts import IDEA_GENERATOR, RECIPE_WRITER
from .sanitizer import clean_json

logger = logging.getLogger(__name__)


class ModelFormatError(ValueError):
    """The model replied with something that is not the JSON shape we asked for."""


def _prompt_fields(prefs: FriendPreferences) -> dict:
    return {
        "interests": prefs.interests,
        "love_language": prefs.love_language_text(),
        "budget": prefs.budget,
        "occasion": prefs.occasion,
        "gifter_preferences": prefs.gifterPreferences,
        "time_available": prefs.timeAvailable,
        "gift_type": prefs.giftType,
    }


def build_ideas_prompt(prefs: FriendPreferences, count: int = IDEA_COUNT) -> str:
    return IDEA_GENERATOR.format(count=count, **_prompt_fields(prefs)).strip()


def build_recipe_prompt(title: str, prefs: FriendPreferences) -> str:
    return RECIPE_WRITER.format(title=title, **_prompt_fields(prefs)).strip()


def _load(raw: str) -> Any:
    cleaned = clean_json(raw)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ModelFormatError(f"Response is not valid JSON: {e.msg}") from e


def parse_ideas(raw: str) -> List[GiftIdea]:
    """
    Parses the model's idea reply into GiftIdea objects.
    Either every element is valid or ModelFormatError is raised; a partial
    list is never returned.
    """
    data = _load(raw)
    if not isinstance(data, list):
        raise ModelFormatError(f"Expected a JSON array of gift ideas, got {type(data).__name__}")

    ideas = []
    for i, it in enumerate(data):
        if not isinstance(it, dict):
            raise ModelFormatError(f"Gift idea {i} is not an object")
        try:
            ideas.append(GiftIdea.model_validate(it))
        except ValidationError as e:
            raise ModelFormatError(f"Gift idea {i} is missing id, title or description") from e
    return ideas


def parse_recipe(raw: str) -> GiftRecipe:
    data = _load(raw)
    if not isinstance(data, dict):
        raise ModelFormatError(f"Expected a JSON object for the recipe, got {type(data).__name__}")
    try:
        return GiftRecipe.model_validate(data)
    except ValidationError as e:
        missing = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ModelFormatError(f"Recipe has invalid fields: {', '.join(missing)}") from e


def generate_gift_ideas(prefs: FriendPreferences, generate: GenerateFn, count: int = IDEA_COUNT) -> List[GiftIdea]:
    prompt = build_ideas_prompt(prefs, count=count)
    logger.info("Requesting %d gift ideas", count)
    raw = generate(prompt)
    ideas = parse_ideas(raw)
    logger.info("Model returned %d gift ideas", len(ideas))
    return ideas


def generate_recipe(title: str, prefs: FriendPreferences, generate: GenerateFn) -> GiftRecipe:
    prompt = build_recipe_prompt(title, prefs)
    logger.info("Requesting recipe for %r", title)
    raw = generate(prompt)
    return parse_recipe(raw)
