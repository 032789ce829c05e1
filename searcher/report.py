from dataclasses import dataclass, field
from typing import List, Union

Text = Union[bytes, str]


@dataclass
class MatchContext:
    """One reported occurrence: the pattern as typed, where it sits, and what surrounds it."""
    pattern: Text       # original case, as supplied by the caller
    position: int       # visible offset (newlines not counted)
    context: Text       # original-case window around the match


@dataclass
class Report:
    entries: List[MatchContext] = field(default_factory=list)

    @property
    def is_empty(self):
        return not self.entries

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
