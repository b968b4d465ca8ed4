"""
Named, pre-compiled regex patterns.

Every pattern in this package is anchored or uses bounded quantifiers so that
matching stays linear on arbitrary notification text.
"""

from dataclasses import dataclass, field
from typing import Optional
import re

# Shared building blocks
# Starts and ends on a digit so trailing punctuation is left out. The guard
# rejects a number that keeps going past the cap instead of truncating it.
AMOUNT = r'([0-9](?:[0-9.,]{0,18}[0-9])?)(?![0-9]|[.,][0-9])'
CURRENCY = r'R\$\s{0,5}'
# Rest of the line, capped; the cleaner truncates further
REST = r'(.{1,120})'


@dataclass(frozen=True)
class PatternSpec:
    """A named regex pattern with example and notes for documentation."""
    name: str
    pattern: str
    example: str
    notes: Optional[str] = None
    flags: int = re.IGNORECASE
    compiled: re.Pattern = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'compiled', re.compile(self.pattern, self.flags))

    def search(self, text: str) -> Optional[re.Match]:
        return self.compiled.search(text)
