"""The contract for anything sent through the Send API."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Payload(ABC):
    """An object that can be serialised into a Send API JSON body."""

    @abstractmethod
    def to_json(self) -> str:
        """Return the JSON text the API consumes for this object."""