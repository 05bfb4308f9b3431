import os
from dotenv import load_dotenv

load_dotenv()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "").strip()
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o").strip()

# How many ideas the idea prompt asks for
IDEA_COUNT = int(os.getenv("IDEA_COUNT", "3"))

GUILTED_API_URL = os.getenv("GUILTED_API_URL", "http://127.0.0.1:8000").strip().rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:8501").split(",")
    if o.strip()
]

LOVE_LANGUAGES = [
    "Words of Affirmation",
    "Acts of Service",
    "Receiving Gifts",
    "Quality Time",
    "Physical Touch",
]

GIFT_TYPES = ["solo", "group"]
