from typing import Any, Dict, Iterable, Optional, Tuple
from bella.errors import RedeclarationError, UnboundVariableError


class Environment:
    """One scope frame mapping identifiers to values, chained to its parent."""
    def __init__(self, parent: Optional['Environment'] = None, name: str = 'global'):
        self.parent = parent
        self.name = name  # for debug output
        self.values: Dict[str, Any] = {}

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self.values.keys())

    def has(self, name: str) -> bool:
        if name in self.values:
            return True
        if self.parent:
            return self.parent.has(name)
        return False

    def lookup(self, name: str) -> Any:
        env = self
        while env is not None:
            if name in env.values:
                return env.values[name]
            env = env.parent
        raise UnboundVariableError(f'unknown variable {name}')

    def assign(self, name: str, value: Any):
        # Rebind in the nearest frame that already holds the name
        env = self
        while env is not None:
            if name in env.values:
                env.values[name] = value
                return
            env = env.parent
        raise UnboundVariableError(f'cannot assign to undeclared variable {name}')

    def declare(self, name: str, value: Any):
        if name in self.values:
            raise RedeclarationError(f'variable {name} already declared')
        self.values[name] = value

    def child(self, bindings: Iterable[Tuple[str, Any]] = (), name: str = 'call') -> 'Environment':
        frame = Environment(parent=self, name=name)
        for key, value in bindings:
            frame.declare(key, value)
        return frame

    def __repr__(self) -> str:
        return f"<Environment {self.name} {sorted(self.values)}>"
