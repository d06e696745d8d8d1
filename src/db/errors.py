from __future__ import annotations


class StorageError(Exception):
    """The SQLite store could not be opened, read or written."""


class StaleReference(Exception):
    """An operation targeted a binder, song or link that no longer exists."""

    def __init__(self, entity: str, entity_id: object):
        super().__init__(f"{entity.capitalize()} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id
