import json

from loguru import logger

from .models import Results, ResultsFormatError


def load_results_from_json(path: str) -> Results:
    """Read a CrewTimer results export saved as JSON."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ResultsFormatError(f"{path} is not valid JSON: {e}") from e

    results = Results.from_dict(data)
    logger.debug(f"Loaded {len(results.results)} events from {path}")
    return results


def to_jsonable(value):
    """Convert calculator output into plain JSON types."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value
