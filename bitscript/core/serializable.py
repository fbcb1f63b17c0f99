"""
Base class for the transaction envelope elements

Inputs, outputs, witness fields and the transaction itself are read from and written back to their wire
form. Equality is defined on the wire bytes so a decoded element compares equal to the one it was built from.
"""
import json
from abc import ABC, abstractmethod

from bitscript.core.byte_stream import SERIALIZED

__all__ = ["Serializable"]


class Serializable(ABC):

    @classmethod
    @abstractmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        """Read one element from the start of the stream, leaving the stream after it"""
        raise NotImplementedError(f"{cls.__name__} must implement from_bytes()")

    @abstractmethod
    def to_bytes(self) -> bytes:
        raise NotImplementedError(f"{self.__class__.__name__} must implement to_bytes()")

    @abstractmethod
    def to_dict(self) -> dict:
        """Display form: hashes in display byte order, scripts as hex"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement to_dict()")

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Serializable):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_bytes().hex()})"
