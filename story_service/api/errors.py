"""Exceptions raised by the story service layer."""


class StoryServiceError(Exception):
    """Base class for story service failures."""


class StoryValidationError(StoryServiceError):
    """Request body failed the field constraints.

    ``errors`` holds one entry per failed rule, in the shape returned to
    clients under the ``errors`` key.
    """

    def __init__(self, errors: list[dict]):
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = errors


class StoryPersistenceError(StoryServiceError):
    """The database rejected or could not complete an operation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedBodyError(StoryServiceError):
    """Request body is not a JSON object."""

    def __init__(self, message: str = "Malformed JSON body"):
        super().__init__(message)
        self.message = message
