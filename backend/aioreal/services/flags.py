from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from aioreal.seed_data import COUNTRIES

_REGIONAL_INDICATOR_A = 0x1F1E6


@dataclass(frozen=True)
class FlagDescriptor:
    code: str
    emoji: str

    @property
    def label(self) -> str:
        # Unknown flags render as their code text
        return self.emoji or self.code


def emoji_for_code(code: str) -> str:
    code = code.upper()
    if len(code) != 2 or not code.isalpha() or not code.isascii():
        return ''
    return ''.join(chr(_REGIONAL_INDICATOR_A + ord(ch) - ord('A')) for ch in code)


class FlagTable:
    """Country code / name -> flag descriptor, with a fallback for unknown keys."""

    def __init__(self, countries: Iterable[Tuple[str, str]]):
        self._by_code: Dict[str, FlagDescriptor] = {}
        self._by_name: Dict[str, FlagDescriptor] = {}
        for name, code in countries:
            descriptor = FlagDescriptor(code=code.upper(), emoji=emoji_for_code(code))
            self._by_code[code.upper()] = descriptor
            self._by_name[name.strip().lower()] = descriptor

    def __contains__(self, key: str) -> bool:
        return self.find(key) is not None

    def find(self, key: Optional[str]) -> Optional[FlagDescriptor]:
        if not key:
            return None
        key = key.strip()
        return self._by_code.get(key.upper()) or self._by_name.get(key.lower())

    def resolve(self, key: Optional[str]) -> FlagDescriptor:
        found = self.find(key)
        if found is not None:
            return found
        return FlagDescriptor(code=(key or '').strip().upper(), emoji='')


FLAGS = FlagTable(COUNTRIES)
