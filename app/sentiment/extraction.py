import re

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def extract_json_text(text: str) -> str:
    """Return the best-guess JSON substring of a model response.

    The interior of the first fenced block wins, with any surrounding prose
    discarded. Without a fence the whole trimmed text is passed through and
    parse failures are left to the validator.
    """
    match = _FENCE_RE.search(text)
    if match:
        return match.group(1).strip()
    return text.strip()
