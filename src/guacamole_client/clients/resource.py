"""Helpers shared by the resource mixins of GuacamoleClient."""

from contextlib import contextmanager
import logging
from typing import Any, TypeVar

from pydantic import ValidationError
from requests.exceptions import RequestException

from guacamole_client.core.exceptions import GuacamoleError, OperationError
from guacamole_client.models.base import GuacamoleModel


ModelT = TypeVar("ModelT", bound=GuacamoleModel)


def parse_map(model: type[ModelT], data: Any) -> dict[str, ModelT]:
    """Validate an identifier-keyed JSON object of resources."""
    return {key: model.model_validate(value) for key, value in (data or {}).items()}


def parse_list(model: type[ModelT], data: Any) -> list[ModelT]:
    """Validate a JSON array of resources."""
    return [model.model_validate(item) for item in data or []]


class ResourceMixin:
    """Wraps operation failures with context.

    Every public operation runs inside ``_operation`` so that whatever goes
    wrong surfaces as one :class:`OperationError` naming the operation and
    its target, chained to the original exception.
    """

    logger: logging.Logger

    @contextmanager
    def _operation(self, operation: str, identifier: str | None = None):
        try:
            yield
        except (GuacamoleError, RequestException, ValidationError) as e:
            if identifier is None:
                self.logger.error("Failed to %s: %s", operation, str(e))
            else:
                self.logger.error("Failed to %s %s: %s", operation, identifier, str(e))
            raise OperationError(operation, identifier, cause=e) from e
