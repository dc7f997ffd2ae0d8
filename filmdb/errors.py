"""Error types raised by the data-access layer.

Absence of a record is not an error: repositories return ``None`` (or
``False`` for deletes) and the route decides on the 404. Invalid input is
reported with :class:`marshmallow.ValidationError`.
"""


class FilmdbError(Exception):
    """Base class for data-access failures."""


class StoreError(FilmdbError):
    """The relational store rejected or failed an operation."""


ENTITY_LABELS = {"Actor": "El actor", "Film": "La película"}


class MissingReferenceError(FilmdbError):
    """A link points at an actor or film that does not exist."""

    def __init__(self, entity, key):
        self.entity = entity
        self.key = key
        super().__init__(f"{ENTITY_LABELS.get(entity, entity)} {key} no existe")


def describe_validation_error(err):
    """Flatten marshmallow error messages into one line.

    ``{"first_name": ["Missing data for required field."]}`` becomes
    ``"first_name: Missing data for required field."``. Bulk payloads nest
    messages under the item index, which is kept as a prefix.
    """
    parts = []

    def walk(messages, prefix):
        if isinstance(messages, dict):
            for key, value in messages.items():
                name = f"{prefix}.{key}" if prefix else str(key)
                walk(value, name)
        elif isinstance(messages, list):
            for value in messages:
                walk(value, prefix)
        else:
            parts.append(f"{prefix}: {messages}" if prefix else str(messages))

    walk(err.messages, "")
    return "; ".join(parts)
