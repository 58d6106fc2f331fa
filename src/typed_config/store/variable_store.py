from dataclasses import dataclass, field
from typing import Dict, ItemsView, Iterator, Optional

from ..core.variable import Variable
from ..errors import DuplicateNameError


@dataclass
class VariableStore:
    """Simple storage for declared variables, keyed by name"""
    variables: Dict[str, Variable] = field(default_factory=dict)

    def add_variable(self, name: str, variable: Variable) -> None:
        """Add a variable, refusing to overwrite an existing name"""
        if name in self.variables:
            raise DuplicateNameError(f"redefinition of entity: {name}")
        self.variables[name] = variable

    def get_variable(self, name: str) -> Optional[Variable]:
        return self.variables.get(name)

    def items(self) -> ItemsView[str, Variable]:
        return self.variables.items()

    def __contains__(self, name: object) -> bool:
        return name in self.variables

    def __iter__(self) -> Iterator[str]:
        return iter(self.variables)

    def __len__(self) -> int:
        return len(self.variables)
