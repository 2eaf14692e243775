from psi.reader.cursor import Cursor
from psi.reader.parser import Parser, parse, read, MAX_SYMBOL_LENGTH

__all__ = ["Cursor", "Parser", "parse", "read", "MAX_SYMBOL_LENGTH"]
