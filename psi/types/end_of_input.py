from __future__ import annotations


class EndOfInputType:
    """Marker returned by the reader when only whitespace remains.

    Distinct from every Value, including errors: running out of input is not a
    syntax error at the top level.
    """
    __slots__ = ()

    def __repr__(self): return "END_OF_INPUT"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, EndOfInputType)

    def __hash__(self):
        return hash(EndOfInputType)


END_OF_INPUT = EndOfInputType()
