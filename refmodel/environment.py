from typing import Dict, Iterator, List, Optional, Tuple

from refmodel.errors import NotFound, UndefinedRead
from refmodel.values import Undefined, Value, to_string


class Environment:
    """Flat mutable store mapping place names to values.

    There is no parent chain and no shadowing: inserting a name that is
    already bound replaces the old value.
    """
    def __init__(self, bindings: Optional[Dict[str, Value]] = None):
        self.values: Dict[str, Value] = dict(bindings) if bindings else {}

    @property
    def bindings(self) -> Dict[str, Value]:
        # copy so callers never hold a live handle into the store
        return dict(self.values)

    def lookup(self, place: str) -> Value:
        if place not in self.values:
            raise NotFound(place)
        value = self.values[place]
        if isinstance(value, Undefined):
            raise UndefinedRead(place)
        return value

    def insert(self, place: str, value: Value) -> None:
        self.values[place] = value

    def items(self) -> List[Tuple[str, Value]]:
        return sorted(self.values.items(), key=lambda kv: kv[0])

    def __contains__(self, place: object) -> bool:
        return place in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self.values == other.values

    def __repr__(self) -> str:
        return f"Environment({self.values!r})"

    def __str__(self) -> str:
        return ''.join(f"{name} ↦ {to_string(value)}\n" for name, value in self.items())
