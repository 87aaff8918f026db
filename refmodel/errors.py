from typing import Any, Optional


class RefModelError(Exception):
    """Base exception for every failure raised while parsing or evaluating."""
    kind = 'RefModelError'

    def __init__(self, message: str):
        super().__init__(f"{self.kind}: {message}")
        self.message = message


class NotFound(RefModelError):
    """Lookup of a place that was never bound."""
    kind = 'NotFound'

    def __init__(self, place: str):
        super().__init__(f"cannot find place: {place}")
        self.place = place


class UndefinedRead(RefModelError):
    """Lookup of a place that is bound to the undefined marker."""
    kind = 'UndefinedRead'

    def __init__(self, place: str):
        super().__init__(f"attempting to read undefined place: {place}")
        self.place = place


class TypeMismatch(RefModelError):
    """Dereference of a value that is not a reference."""
    kind = 'TypeMismatch'

    def __init__(self, value: Any):
        super().__init__(f"cannot dereference a non-reference value: {value!r}")
        self.value = value


class UnsupportedConstruct(RefModelError):
    """A statement, pattern or expression outside the evaluated subset."""
    kind = 'UnsupportedConstruct'

    def __init__(self, node: Any, role: str = 'expression'):
        super().__init__(f"unsupported {role}: {type(node).__name__}")
        self.node = node
        self.role = role


class ParseError(RefModelError):
    """Source text that does not parse as a block."""
    kind = 'ParseError'

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        if line is not None and line > 0:
            message = f"line {line}, column {column}: {message}"
        super().__init__(message)
        self.line = line
        self.column = column
