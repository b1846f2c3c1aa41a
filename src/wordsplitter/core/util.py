"""Small utility functions."""

import json
from typing import Any, Optional

def normalize_word(word: Optional[str]) -> str:
    """Trim and lowercase a word for dictionary lookup."""
    if word is None:
        return ""
    return word.strip().lower()

def safe_json(obj: Any) -> str:
    """Safely serialize results to JSON, handling dataclasses and tuples."""
    def serialize_item(item):
        if hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple, frozenset, set)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item

    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except Exception as e:
        return f"<serialization error: {e}>"
