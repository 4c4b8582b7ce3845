"""Validation of structured values."""

import dataclasses

from pydantic import BaseModel, TypeAdapter


class ValidatorUtil:
    """Checks that a model or dataclass instance satisfies its declared rules."""

    def validate(self, value):
        """Validate ``value`` and return a validated copy.

        Raises ``pydantic.ValidationError`` when a rule is broken and
        ``TypeError`` when ``value`` is not a model or dataclass instance.
        """
        if isinstance(value, BaseModel):
            return type(value).model_validate(value.model_dump(by_alias=True))
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            data = {
                f.name: getattr(value, f.name)
                for f in dataclasses.fields(value)
                if f.init
            }
            return TypeAdapter(type(value)).validate_python(data)
        raise TypeError(f"validator: cannot validate value of type {type(value).__name__}")