"""
Response parser for turning upstream JSON bodies into typed records.

Examples:
- b'{"userId": 1, "title": "get another cat"}' → TodoItem(title='get another cat')
- b'{"text": "cats sleep a lot", "type": "cat"}' → CatFact(text='cats sleep a lot')
"""

from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError
from ..models import TodoItem, CatFact

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResponseParser:
    """
    Parser for upstream JSON payloads.

    Decoding is partial: only the fields declared on the model are read,
    anything else in the payload is ignored. Values are not coerced, so a
    numeric title is a decode failure.
    """

    @classmethod
    def decode(cls, data: bytes, model: Type[ModelT], upstream: str = "unknown") -> ModelT:
        """
        Decode a JSON body into the given model.

        Args:
            data: Raw response body
            model: Pydantic model to validate against
            upstream: Upstream name, reported on failure

        Returns:
            Model instance

        Raises:
            DecodeError: If the body is not JSON or does not fit the model
        """
        try:
            return model.model_validate_json(data)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
                for err in e.errors()
            )
            raise DecodeError(f"cannot decode {model.__name__}: {problems}", upstream=upstream) from e

    @classmethod
    def decode_todo(cls, data: bytes) -> TodoItem:
        """
        Decode a to-do service body.

        >>> ResponseParser.decode_todo(b'{"title": "get another cat"}').title
        'get another cat'
        """
        return cls.decode(data, TodoItem, upstream="todo")

    @classmethod
    def decode_cat_fact(cls, data: bytes) -> CatFact:
        """
        Decode a cat fact service body.

        >>> ResponseParser.decode_cat_fact(b'{"text": "cats purr"}').text
        'cats purr'
        """
        return cls.decode(data, CatFact, upstream="cats")


def decode_todo(data: bytes) -> TodoItem:
    return ResponseParser.decode_todo(data)


def decode_cat_fact(data: bytes) -> CatFact:
    return ResponseParser.decode_cat_fact(data)
