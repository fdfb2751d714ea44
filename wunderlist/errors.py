"""Exceptions raised by the Wunderlist client."""

from __future__ import annotations

from typing import Iterable

from loguru import logger


class WunderlistError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(WunderlistError):
    """Client ID or access token is missing."""


class UnknownEndpointError(WunderlistError):
    pass


class AbstractEndpointError(UnknownEndpointError):
    """The requested endpoint only exists as a base for concrete variants."""


class MethodNotAllowedError(WunderlistError):
    def __init__(self, endpoint: str | None, verb: str):
        super().__init__(f"Method {verb} not available for endpoint {endpoint}")
        self.endpoint = endpoint
        self.verb = verb


class MissingIdentifierError(WunderlistError):
    pass


class MissingListIdError(MissingIdentifierError):
    pass


class MissingTaskIdError(MissingIdentifierError):
    pass


class EmptyPayloadError(WunderlistError):
    pass


class UnknownFieldError(WunderlistError):
    def __init__(self, field: str, valid_fields: Iterable[str]):
        self.field = field
        self.valid_fields = tuple(valid_fields)
        super().__init__(
            f"Invalid field {field}. List of available fields are {', '.join(self.valid_fields)}"
        )


class EndpointDefinitionError(WunderlistError):
    """
    Raised when an endpoint definition is inconsistent.
    These are programming defects rather than user errors, so they are logged on creation.
    """
    def __init__(self, message: str):
        super().__init__(message)
        logger.error(f"{self.__class__.__name__}: {message}")


class MissingSchemaError(EndpointDefinitionError):
    pass


class InvalidScenarioError(EndpointDefinitionError):
    pass


class NoValidFieldsError(EndpointDefinitionError):
    pass


class ValidationError(WunderlistError):
    """A single field failed its validation rule."""

    def __init__(self, property: str | None, rule: str, message: str):
        self.property = property
        self.rule = rule
        self.message = message
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"{self.rule} validation error. {self.property} {self.message}"


class CrossFieldValidationError(ValidationError):
    """A combination of fields is invalid even though each field passed on its own."""

    def __init__(self, endpoint: str | None, message: str):
        self.endpoint = endpoint
        super().__init__(None, "CrossField", message)

    def _describe(self) -> str:
        return f"{self.endpoint} {self.message}"


class InvalidDeletePayloadError(WunderlistError):
    pass


class ParamValidationError(WunderlistError):
    """A query-string parameter is missing or outside its allowed values."""


class TransportError(WunderlistError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
