from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class NativeFunction:
    name: str
    arity: int
    fn: Callable[..., float]

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
