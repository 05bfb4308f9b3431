# backend/api.py

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import CORS_ORIGINS, IDEA_COUNT, LOG_LEVEL
from .llm import GenerateFn, default_generator
from .models import ErrorResponse, GiftIdeasRequest, GiftIdeasResponse, GiftRecipeRequest, GiftRecipeResponse
from .recommender import ModelFormatError, generate_gift_ideas, generate_recipe

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

FORMAT_ERROR = "Invalid response format from AI"


def _error(status: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status, content=body)


def _missing_fields(exc: RequestValidationError) -> str:
    names = []
    for err in exc.errors():
        loc = [str(x) for x in err.get("loc", ()) if x != "body"]
        names.append(".".join(loc) or "body")
    return ", ".join(dict.fromkeys(names))


def create_app(generate: Optional[GenerateFn] = None, idea_count: int = IDEA_COUNT) -> FastAPI:
    """
    Builds the API. `generate` is the prompt -> completion call; when omitted the
    OpenAI generator is built from the environment, which fails fast without a key.
    """
    if generate is None:
        generate = default_generator()

    app = FastAPI(title="Guilted")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError):
        fields = _missing_fields(exc)
        logger.warning("Rejected %s: invalid fields %s", request.url.path, fields)
        return _error(400, "Missing or invalid required fields", fields)

    @app.get("/api/health")
    def health():
        return {"status": "healthy"}

    @app.post("/api/generate-gifts", response_model=GiftIdeasResponse)
    def generate_gifts(body: GiftIdeasRequest):
        try:
            ideas = generate_gift_ideas(body.friendPreferences, generate, count=idea_count)
        except ModelFormatError as e:
            logger.error("Model returned malformed gift ideas: %s", e, exc_info=True)
            return _error(500, FORMAT_ERROR, str(e))
        except Exception as e:
            logger.error("Error generating gift ideas: %s", e, exc_info=True)
            return _error(500, "Failed to generate gift ideas")
        return GiftIdeasResponse(giftIdeas=ideas)

    @app.post("/api/generate-recipe", response_model=GiftRecipeResponse)
    def generate_gift_recipe(body: GiftRecipeRequest):
        try:
            recipe = generate_recipe(body.giftTitle, body.effective_preferences(), generate)
        except ModelFormatError as e:
            logger.error("Model returned a malformed recipe: %s", e, exc_info=True)
            return _error(500, FORMAT_ERROR, str(e))
        except Exception as e:
            logger.error("Error generating gift recipe: %s", e, exc_info=True)
            return _error(500, "Failed to generate gift recipe")
        return GiftRecipeResponse(recipe=recipe)

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.api:create_app", factory=True, host="127.0.0.1", port=8000)
