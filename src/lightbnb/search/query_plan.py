from dataclasses import dataclass, field
from typing import Any, List


@dataclass(kw_only=True, frozen=True)
class QueryPlan:
    clauses: List[str] = field(default_factory=list)
    params: List[Any] = field(default_factory=list)
    query: str
