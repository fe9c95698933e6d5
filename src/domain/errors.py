"""Exceptions raised while serving a distance request."""


class InvalidParameterError(ValueError):
    """A query parameter is missing or is not a finite float."""

    def __init__(self, param: str, message: str):
        super().__init__(message)
        self.param = param
        self.message = message


class ResponseSerializationError(Exception):
    """The response payload could not be encoded as JSON."""
