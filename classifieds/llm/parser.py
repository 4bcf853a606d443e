import json
import re

JSON_ARRAY_RE = re.compile(r"\[.*\]", re.DOTALL)


class MalformedSuggestionError(ValueError):
    """Raised when model output cannot be read as a list of filter strings."""


def parse_facet_output(raw_text: str, limit: int = 5) -> list[str]:
    text = (raw_text or "").strip()
    if not text:
        return []

    payload = _load_json_array(text)
    facets: list[str] = []
    for value in payload:
        if not isinstance(value, str):
            continue
        cleaned = " ".join(value.split()).strip(" .\"'")
        if cleaned and cleaned not in facets:
            facets.append(cleaned)
    return facets[:limit]


def _load_json_array(text: str) -> list:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        # Models sometimes wrap the array in prose or code fences.
        match = JSON_ARRAY_RE.search(text)
        if not match:
            raise MalformedSuggestionError(f"no JSON array in output: {text[:80]!r}")
        try:
            payload = json.loads(match.group(0))
        except json.JSONDecodeError as exc:
            raise MalformedSuggestionError(f"invalid JSON array: {text[:80]!r}") from exc

    if isinstance(payload, dict):
        payload = payload.get("filters") or payload.get("facets") or []
    if not isinstance(payload, list):
        raise MalformedSuggestionError(f"expected a JSON array, got {type(payload).__name__}")
    return payload


def parse_category_output(raw_text: str, valid_ids: set[str]) -> str:
    candidate = (raw_text or "").strip().strip("`'\" .").split()
    if not candidate:
        return ""
    category_id = candidate[0].strip("`'\" .,").lower()
    return category_id if category_id in valid_ids else ""


def parse_text_output(raw_text: str) -> str:
    return (raw_text or "").strip().strip("`").strip().strip('"').strip()
