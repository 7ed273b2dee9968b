"""Record parser — one NDJSON line into a LogEvent.

Decoding is done with the stdlib json module; the fixed part of the
record is checked against a JSON Schema so every failure comes back with
the decoder's own description.
"""

import json
import logging
from typing import Any

import jsonschema
from jsonschema.exceptions import best_match

from log_parser.models import FIXED_FIELDS, LogEvent

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1

LOG_EVENT_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": list(FIXED_FIELDS),
    "properties": {
        "timestamp": {"type": "integer", "minimum": 0, "maximum": U64_MAX},
        "level": {"type": "string"},
        "message": {"type": "string"},
    },
    "additionalProperties": True,
}


def _is_strict_integer(checker, instance) -> bool:
    # JSON Schema treats 1.0 as an integer; a timestamp must be an integer token.
    return isinstance(instance, int) and not isinstance(instance, bool)


_StrictValidator = jsonschema.validators.extend(
    jsonschema.Draft202012Validator,
    type_checker=jsonschema.Draft202012Validator.TYPE_CHECKER.redefine(
        "integer", _is_strict_integer
    ),
)
_validator = _StrictValidator(LOG_EVENT_SCHEMA)


class LogParseError(Exception):
    """Raised when a line cannot be decoded into a LogEvent."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_json_log(line: str) -> LogEvent:
    """Decode one line of JSON into a LogEvent.

    Keys other than timestamp, level and message are collected into
    ``extra``. Duplicate keys follow the json module: the last one wins.

    Raises:
        LogParseError: malformed JSON, a non-object document, a missing
            fixed field, a fixed field of the wrong type, or nesting too deep
            for the decoder.
    """
    try:
        data = json.loads(line, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.debug("JSON decode failed: %s", e)
        raise LogParseError(str(e)) from e

    error = best_match(_validator.iter_errors(data))
    if error is not None:
        logger.debug("Schema check failed at %s: %s", error.json_path, error.message)
        raise LogParseError(error.message)

    extra = {k: v for k, v in data.items() if k not in FIXED_FIELDS}
    return LogEvent(
        timestamp=data["timestamp"],
        level=data["level"],
        message=data["message"],
        extra=extra,
    )
