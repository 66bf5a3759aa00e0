import json
import logging
from dataclasses import dataclass
from typing import Any


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedJson:
    """Result of reading a stored JSON column.

    ``is_raw`` is True when the stored text was not valid JSON and ``value``
    holds that text unchanged.
    """

    value: Any
    is_raw: bool = False


def encode_json(value: Any) -> str:
    return json.dumps(value)


def safe_parse(value: Any) -> ParsedJson:
    if not isinstance(value, (str, bytes, bytearray)):
        return ParsedJson(value=value)

    try:
        return ParsedJson(value=json.loads(value))
    except ValueError:
        logger.warning('Stored value is not valid JSON; returning it unparsed.')
        raw = value.decode('utf-8', errors='replace') if isinstance(value, (bytes, bytearray)) else value
        return ParsedJson(value=raw, is_raw=True)


def is_missing(value: Any) -> bool:
    """True for null and falsy scalars. Empty lists and objects count as present."""
    if value is None or value is False or value == '':
        return True
    return isinstance(value, (int, float)) and value == 0


def merge_answers(existing: Any, incoming: dict[str, Any]) -> dict[str, Any]:
    """Shallow merge: incoming keys replace stored ones, other stored keys survive."""
    base = existing if isinstance(existing, dict) else {}
    return {**base, **incoming}
