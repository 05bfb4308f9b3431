import re

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```$")


def clean_json(text: str) -> str:
    """
    Strips a markdown code fence the model sometimes wraps its JSON in.
    Only removes one leading marker (optionally tagged json) and one trailing
    marker. Does not check that what is left is valid JSON.
    """
    t = (text or "").strip()
    t = _LEADING_FENCE.sub("", t, count=1)
    t = _TRAILING_FENCE.sub("", t, count=1)
    return t.strip()
