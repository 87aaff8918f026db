"""Runtime values for the reference model.

The evaluator only ever produces or stores one of four values: `Unit`,
`Lit`, `Ref` and `Undefined`. A `Ref` names another place and does not
hold a copy of what is stored there; reading through it always sees the
current contents of that place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Unit:
    """Result of an assignment expression."""

    def __repr__(self) -> str:
        return 'Unit'


@dataclass(frozen=True)
class Lit:
    """A literal value.

    `text` is the literal exactly as written in the source (`1`, `0x1F`,
    `3u8`), which is also how it is displayed. `kind` records which family
    of literal it came from; the evaluator only produces `int` literals.
    """
    text: str
    kind: str = 'int'

    def __repr__(self) -> str:
        return f"Lit({self.text})"


@dataclass(frozen=True)
class Ref:
    """A reference to the place called `place`."""
    place: str

    def __repr__(self) -> str:
        return f"Ref({self.place})"


@dataclass(frozen=True)
class Undefined:
    """Marker bound to a declared name that has not been initialized."""

    def __repr__(self) -> str:
        return 'Undefined'


Value = Union[Unit, Lit, Ref, Undefined]

UNIT = Unit()
UNDEFINED = Undefined()


def to_string(value: Value) -> str:
    """Render a value the way the environment dump shows it."""
    if isinstance(value, Lit):
        return value.text
    if isinstance(value, Ref):
        return f"&{value.place}"
    if isinstance(value, Unit):
        return '()'
    if isinstance(value, Undefined):
        return 'undefined'
    raise TypeError(f"not a runtime value: {value!r}")
