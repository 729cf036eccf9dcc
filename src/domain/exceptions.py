# domain/exceptions.py
import json


class ValidationError(Exception):
    """A document failed its schema (missing field, wrong type, range, enum...)."""


class CastError(ValidationError):
    def __init__(self, field: str, value, expected: str):
        self.field = field
        self.value = value
        super().__init__(f'Cast to {expected} failed for value "{value}" at path "{field}"')


class DuplicateKeyError(ValidationError):
    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Duplicate unique field: {json.dumps({field: value}, default=str)}")
