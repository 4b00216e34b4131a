from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Protocol, TypeVar


class SearchablePolicy(Protocol):
    name: str
    policy_number: str


P = TypeVar("P", bound=SearchablePolicy)


@dataclass(frozen=True, slots=True)
class PolicySearch:
    """Case-insensitive substring search over holder name and policy number.

    The query is matched literally. An empty query matches every policy.
    """

    query: str
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", re.compile(re.escape(self.query), re.IGNORECASE))

    def matches(self, policy: SearchablePolicy) -> bool:
        return bool(self.pattern.search(policy.name) or self.pattern.search(policy.policy_number))

    def filter(self, policies: Iterable[P]) -> list[P]:
        return [p for p in policies if self.matches(p)]
