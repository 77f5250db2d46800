from dataclasses import dataclass, field
from typing import Dict, List

from calcir.ir import ir


def is_temp(name: str) -> bool:
    return name.startswith(ir.TEMP_PREFIX)


@dataclass
class VariableRegistry:
    """
    The set of every name that has storage or a value: source variables and
    temporaries alike. Names are kept in declaration order and are never
    removed.
    """
    # A dict is used as an insertion-ordered set.
    names: Dict[str, None] = field(default_factory=dict)

    def declare(self, name: str) -> bool:
        """Adds `name` and returns `True` if it wasn't already declared."""
        if name in self.names:
            return False
        self.names[name] = None
        return True

    def contains(self, name: str) -> bool:
        return name in self.names

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def source_names(self) -> List[str]:
        return [name for name in self.names if not is_temp(name)]
