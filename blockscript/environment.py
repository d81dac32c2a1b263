from typing import Dict, Tuple

from blockscript.errors import ErrorKind, ErrorRecord, ScriptError
from blockscript.types import Value


class VariableStore:
    """Maps declared names to their declared type word and current value.

    There is a single flat namespace: declaring a name again replaces the
    previous entry outright. The declared type is kept for reference only
    and is never checked against later values.
    """
    def __init__(self):
        self.values: Dict[str, Value] = {}
        self.types: Dict[str, str] = {}

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)

    def get(self, name: str) -> Value:
        if name in self.values:
            return self.values[name]
        raise ScriptError(ErrorRecord(ErrorKind.VARIABLE_NOT_FOUND, f'variable not found: {name}'))

    def entry(self, name: str) -> Tuple[str, Value]:
        value = self.get(name)
        return self.types[name], value

    def declare(self, name: str, type_word: str, value: Value):
        self.values[name] = value
        self.types[name] = type_word

    def reset(self):
        self.values.clear()
        self.types.clear()
