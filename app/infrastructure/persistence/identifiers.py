"""Unique identifier generation for records and localization sets."""

import base64
import uuid
from abc import ABC, abstractmethod


class IdentifierGenerator(ABC):
    """Produces globally unique identifiers."""

    @abstractmethod
    def new_id(self) -> str:
        """Return a new unique identifier."""


class RandomIdGenerator(IdentifierGenerator):
    """26 character lower-case base32 encoding of a random UUID.

    Ids are URL safe and shorter than the canonical hex form.
    """

    def new_id(self) -> str:
        encoded = base64.b32encode(uuid.uuid4().bytes).decode("ascii")
        return encoded.rstrip("=").lower()
