from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    EMPTY_INPUT = 'EmptyInput'
    INVALID_JSON = 'InvalidJson'
    NOT_AN_ARRAY = 'NotAnArray'
    FIRST_ITEM_NOT_OBJECT = 'FirstItemNotObject'
    INTERNAL_ERROR = 'InternalError'


# Exact text returned to clients; callers compare these byte for byte.
MESSAGES = {
    ErrorKind.EMPTY_INPUT: "JSON vazio.",
    ErrorKind.INVALID_JSON: "JSON inválido.",
    ErrorKind.NOT_AN_ARRAY: "JSON deve ser um array não vazio.",
    ErrorKind.FIRST_ITEM_NOT_OBJECT: "O primeiro item do array deve ser um objeto.",
    ErrorKind.INTERNAL_ERROR: "Erro interno: {details}",
}


@dataclass(frozen=True)
class ConversionError:
    """A failed conversion: the error kind plus optional details."""

    kind: ErrorKind
    details: str = ''

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.INTERNAL_ERROR:
            return MESSAGES[self.kind].format(details=self.details)
        return MESSAGES[self.kind]

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of `convert`: either `text` or `error` is set, never both."""

    text: Optional[str] = None
    error: Optional[ConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> 'ConversionResult':
        return cls(text=text)

    @classmethod
    def failure(cls, kind: ErrorKind, details: str = '') -> 'ConversionResult':
        return cls(error=ConversionError(kind, details))
