from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ErrorValue:
    """A failed parse or evaluation step, carried as ordinary data.

    Errors are never raised. They are returned up the call chain, printed as
    ``$error{<kind> <message>}`` and may be passed to the evaluator, which
    returns an equal copy.
    """

    kind: str
    message: str

    def __str__(self):
        return f"$error{{{self.kind} {self.message}}}"
