from typing import Any, Type, TypeVar, Union

from pydantic import TypeAdapter

T = TypeVar("T")


class JsonSerializer:
    """Encode request payloads and decode response bodies with pydantic."""

    def serialize(self, value: Any) -> bytes:
        return TypeAdapter(type(value)).dump_json(
            value, by_alias=True, exclude_none=True
        )

    def deserialize(self, data: Union[str, bytes], target: Type[T]) -> T:
        return TypeAdapter(target).validate_json(data)
