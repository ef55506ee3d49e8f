"""
Token value type.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Token(Generic[T]):
    """A signed token string and the subject it carries.

    A token is either valid (``subject`` present, ``invalid`` False) or
    invalid (``subject`` None, ``invalid`` True). ``value`` is always set: the
    newly signed string on creation, the caller's input on parse.
    """

    value: str
    subject: Optional[T] = None
    invalid: bool = False

    @property
    def valid(self) -> bool:
        return not self.invalid

    @classmethod
    def rejected(cls, value: str) -> "Token[T]":
        return cls(value=value, subject=None, invalid=True)
