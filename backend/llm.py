# backend/llm.py

from typing import Callable, Optional

from openai import OpenAI

from .config import OPENAI_API_KEY, OPENAI_MODEL
from .prompts import SYSTEM_GIFT_BOT

# The only contract the endpoints have with the model: prompt text in, completion text out
GenerateFn = Callable[[str], str]


class OpenAIGenerator:
    """Sends a prompt to the OpenAI Responses API and returns the completion text."""

    def __init__(self, api_key: str, model: str = OPENAI_MODEL, system: str = SYSTEM_GIFT_BOT,
                 client: Optional[OpenAI] = None):
        if not api_key:
            raise RuntimeError(
                "OPENAI_API_KEY not set. Add it to .env "
                "or set it as an environment variable."
            )
        self.model = model
        self.system = system
        self._client = client or OpenAI(api_key=api_key)

    def __call__(self, prompt: str) -> str:
        resp = self._client.responses.create(
            model=self.model,
            input=[
                {"role": "system", "content": self.system},
                {"role": "user", "content": prompt},
            ],
        )
        return resp.output_text


def default_generator() -> OpenAIGenerator:
    return OpenAIGenerator(api_key=OPENAI_API_KEY, model=OPENAI_MODEL)
