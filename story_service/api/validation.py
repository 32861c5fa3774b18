"""Declarative field constraints for story request bodies.

Each operation has a table of FieldRule entries. Every rule in the table is
evaluated against the raw JSON body, and each failed check produces one
error entry, so a field can report more than one problem.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .errors import StoryValidationError
from .models.enums import StoryStatus

STATUS_MESSAGE = "Status must be one of the following: " + ", ".join(StoryStatus.values())


@dataclass(frozen=True)
class FieldRule:
    """Constraints on one body field.

    optional: skip every check when the key is absent.
    empty_message: if set, the value must be non-empty.
    choices / choices_message: if set, the value must be one of choices.
    """

    field: str
    optional: bool = False
    empty_message: Optional[str] = None
    choices: tuple[str, ...] = ()
    choices_message: Optional[str] = None


CREATE_RULES = (
    FieldRule("title", empty_message="Title is required"),
    FieldRule("content", empty_message="Content is required"),
    FieldRule("createdBy", empty_message="Created by is required"),
    FieldRule(
        "status",
        empty_message="Status is required",
        choices=tuple(StoryStatus.values()),
        choices_message=STATUS_MESSAGE,
    ),
)

UPDATE_RULES = (
    FieldRule("title", optional=True, empty_message="Title cannot be empty"),
    FieldRule("content", optional=True, empty_message="Content cannot be empty"),
    FieldRule("createdBy", optional=True, empty_message="Created by cannot be empty"),
    FieldRule(
        "status",
        optional=True,
        choices=tuple(StoryStatus.values()),
        choices_message=STATUS_MESSAGE,
    ),
)


def as_text(value: Any) -> Optional[str]:
    """String form of a scalar JSON value, or None for null, objects and arrays."""
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


_MISSING = object()


def field_error(field: str, value: Any, message: str) -> dict:
    """Error entry; the value key is left out when the field was not sent."""
    if value is _MISSING:
        return {"type": "field", "msg": message, "path": field, "location": "body"}
    return {"type": "field", "value": value, "msg": message, "path": field, "location": "body"}


def collect_errors(body: dict, rules: tuple[FieldRule, ...]) -> list[dict]:
    """Evaluate every rule against the body and return the failures in table order."""
    errors = []
    for rule in rules:
        if rule.optional and rule.field not in body:
            continue

        value = body.get(rule.field, _MISSING)
        text = None if value is _MISSING else as_text(value)

        if rule.empty_message and not text:
            errors.append(field_error(rule.field, value, rule.empty_message))
        if rule.choices and text not in rule.choices:
            errors.append(field_error(rule.field, value, rule.choices_message))
    return errors


def validated_fields(body: dict, rules: tuple[FieldRule, ...]) -> dict:
    """Return the ruled fields present in the body, as text.

    Raises:
        StoryValidationError: if any rule fails
    """
    errors = collect_errors(body, rules)
    if errors:
        raise StoryValidationError(errors)
    return {rule.field: as_text(body[rule.field]) for rule in rules if rule.field in body}
