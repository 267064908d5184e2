"""Base model and attribute map codec shared by all Guacamole resources."""

from collections.abc import Mapping
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def decode_attributes(raw: Any) -> Any:
    """Decode a Guacamole attribute object.

    Guacamole reports unset attributes as JSON ``null``. These become empty
    strings so callers always get a plain ``dict[str, str]``. A ``null``
    object decodes to an empty dict.

    Args:
        raw: Decoded JSON value of the ``attributes`` field

    Returns:
        Any: Attribute dict, or ``raw`` unchanged if it is not a mapping
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        return raw
    return {key: "" if value is None else value for key, value in raw.items()}


def encode_attributes(attributes: Optional[Mapping[str, str]]) -> dict[str, str]:
    """Encode an attribute map for the wire.

    The result is always a dict, never ``None``. Guacamole answers with
    HTTP 500 when ``attributes`` is missing or null.

    Args:
        attributes: Attribute map, may be None

    Returns:
        dict[str, str]: Attributes as a JSON-ready object
    """
    if not attributes:
        return {}
    return dict(attributes)


NullableStringMap = Annotated[
    dict[str, str],
    BeforeValidator(decode_attributes),
    PlainSerializer(encode_attributes, return_type=dict[str, str]),
]


class GuacamoleModel(BaseModel):
    """Base class for Guacamole REST resources.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    def model_dump(self, **kw):
        kw.setdefault("by_alias", True)
        kw.setdefault("exclude_none", True)
        return super().model_dump(**kw)

    def to_api(self) -> dict[str, Any]:
        """Dump the model as a JSON-ready request body."""
        return self.model_dump(mode="json")
