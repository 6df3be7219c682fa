"""Utility functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from botocore.exceptions import ClientError
from pydantic import BaseModel as _BaseModel

if TYPE_CHECKING:
    from collections.abc import Iterable


class BaseModel(_BaseModel):
    """Base class for domain manager models."""

    def get(self, name: str, default: Any = None) -> Any:
        """Safely get the value of an attribute.

        Args:
            name: Attribute name to return the value for.
            default: Value to return if attribute is not found.

        """
        return getattr(self, name, default)

    def __contains__(self, name: object) -> bool:
        """Implement evaluation of 'in' conditional.

        Args:
            name: The name to check for existence in the model.

        """
        if name in self.__dict__:
            return True
        return bool(self.model_extra and name in self.model_extra)

    def __getitem__(self, name: str) -> Any:
        """Implement evaluation of self[name].

        Args:
            name: Attribute name to return the value for.

        Raises:
            AttributeError: If attribute does not exist on this object.

        """
        return getattr(self, name)


def error_code(error: Exception) -> str:
    """Get the error code of a botocore ``ClientError``.

    Returns an empty string for any other exception.

    """
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code", "")
    return ""


def format_detail(error: Exception, *, debug: bool) -> str | None:
    """Format the provider's error detail for inclusion in a message.

    Args:
        error: Exception raised by the provider.
        debug: Whether debug output is enabled. Detail is dropped otherwise.

    """
    if not debug:
        return None
    return f"{type(error).__name__}: {error}"


def is_api_type_key(key: object, api_types: Iterable[str]) -> bool:
    """Check if a ``customDomain`` key names an API type."""
    return isinstance(key, str) and key.upper() in {i.upper() for i in api_types}
