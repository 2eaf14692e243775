from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from psi.types.value import Value

# Native implementation of a built-in: evaluated arguments in, one value out.
BuiltinFn = Callable[[Sequence["Value"]], "Value"]


@dataclass(frozen=True, slots=True)
class Function:
    """Reference to one of the fixed built-in implementations.

    Only produced by evaluating a symbol that names a built-in; the reader has
    no syntax for it.
    """

    name: str
    fn: BuiltinFn

    def __call__(self, args: Sequence[Value]) -> Value:
        return self.fn(args)

    def __repr__(self):
        return f"Function({self.name!r})"
