"""Base model for Jupyter REST resources that must survive a round trip.

Every resource keeps the fields it knows about as typed attributes and
stashes any other top-level key in pydantic's extra storage, so that a
document can be decoded, edited and re-encoded without dropping data.
"""
import functools
import json
import logging
import math
import typing as t

from pydantic import (BaseModel, ConfigDict, SerializationInfo,
                      SerializerFunctionWrapHandler, TypeAdapter,
                      ValidationError, model_serializer)
from pydantic_core import PydanticSerializationError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"

R = t.TypeVar("R", bound="ResourceModel")


class ResourceError(ValueError):
    """Base class for errors raised while decoding or encoding a resource."""

    def __init__(self, resource: str, message: str) -> None:
        super().__init__(f"{resource}: {message}")
        self.resource = resource


class MalformedDocument(ResourceError):
    """The input is not a valid JSON document."""


class TypeMismatch(ResourceError):
    """The document is valid JSON but does not fit the resource's schema."""

    def __init__(self, resource: str, errors: list[t.Any]) -> None:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in errors
        )
        super().__init__(resource, details)
        self.errors = errors


class EncodeFailure(ResourceError):
    """The resource holds a value that has no JSON representation."""


def _is_empty(value: t.Any) -> bool:
    if value is None:
        return True
    return isinstance(value, (str, list, dict)) and not value


def _reject_constant(name: str) -> t.NoReturn:
    raise ValueError(f"{name} is not a valid JSON value")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


def _check_json(resource: str, data: bytes | str) -> None:
    # NaN, Infinity and numbers beyond float range are not JSON
    try:
        json.loads(data, parse_constant=_reject_constant, parse_float=_parse_float)
    except ValueError as e:
        logger.info("Bad JSON: %r", data)
        logger.info("Couldn't parse JSON")
        raise MalformedDocument(resource, str(e)) from e


def _translate(resource: str, exc: ValidationError) -> ResourceError:
    errors = exc.errors(include_url=False)
    if any(err["type"] == "json_invalid" for err in errors):
        return MalformedDocument(resource, errors[0]["msg"])
    return TypeMismatch(resource, errors)


class ResourceModel(BaseModel):
    """Known fields plus a bag of raw fields, decoded and encoded together.

    Known fields are matched by their JSON key (the field alias) only; any
    other key is kept verbatim in ``raw_fields``. When encoding, known fields
    come first in declaration order followed by the raw fields in the order
    they were decoded. A known field is left out of the output when it holds
    an empty value and was never set, either by the decoded document or by
    the application.
    """

    model_config = ConfigDict(
        extra="allow",
        strict=True,
        validate_assignment=True,
    )

    # Known fields that are emitted even when empty and unset.
    _always_emit: t.ClassVar[frozenset[str]] = frozenset()

    def __init__(self, **data: t.Any) -> None:
        # keyword arguments may use attribute names; documents only ever use JSON keys
        for name, field in type(self).model_fields.items():
            if field.alias and field.alias != name and name in data:
                data[field.alias] = data.pop(name)
        super().__init__(**data)

    @property
    def raw_fields(self) -> dict[str, t.Any]:
        return dict(self.__pydantic_extra__ or {})

    @model_serializer(mode="wrap")
    def _serialize(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, t.Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if name in self._always_emit or name in self.model_fields_set:
                continue
            if not _is_empty(getattr(self, name)):
                continue
            key = (field.serialization_alias or field.alias or name) if info.by_alias else name
            data.pop(key, None)
        return data

    @classmethod
    def decode(cls: type[R], data: bytes | str) -> R:
        """Decode a JSON document into a resource.

        Raises :exc:`MalformedDocument` if ``data`` is not JSON and
        :exc:`TypeMismatch` if a known field has the wrong shape.
        """
        _check_json(cls.__name__, data)
        try:
            model = cls.model_validate_json(data)
        except ValidationError as e:
            logger.info("Bad JSON: %r", data)
            logger.info("Couldn't decode %s", cls.__name__)
            raise _translate(cls.__name__, e) from e
        logger.debug(
            "Decoded %s with %d raw field(s)", cls.__name__, len(model.raw_fields)
        )
        return model

    def encode(self) -> bytes:
        """Encode the resource as compact UTF-8 JSON."""
        try:
            return self.model_dump_json(by_alias=True).encode(ENCODING)
        except PydanticSerializationError as e:
            raise EncodeFailure(type(self).__name__, str(e)) from e

    @classmethod
    def decode_list(cls: type[R], data: bytes | str) -> list[R]:
        """Decode a JSON array of resources, as returned by the list endpoints."""
        _check_json(f"list[{cls.__name__}]", data)
        try:
            return _list_adapter(cls).validate_json(data)
        except ValidationError as e:
            logger.info("Bad JSON: %r", data)
            logger.info("Couldn't decode list of %s", cls.__name__)
            raise _translate(f"list[{cls.__name__}]", e) from e

    @classmethod
    def encode_list(cls, resources: t.Iterable["ResourceModel"]) -> bytes:
        """Encode resources as a JSON array, keeping their order."""
        resources = list(resources)
        try:
            return _list_adapter(cls).dump_json(resources, by_alias=True)
        except PydanticSerializationError as e:
            raise EncodeFailure(f"list[{cls.__name__}]", str(e)) from e


@functools.lru_cache(maxsize=None)
def _list_adapter(cls: type) -> TypeAdapter:
    return TypeAdapter(list[cls])  # type: ignore[valid-type]
