from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final, List, Optional

_param_placeholder: Final[str] = "${position}"


class Comparator(str, Enum):
    LIKE = "LIKE"
    EQ = "="
    GE = ">="
    LE = "<="


@dataclass
class SearchClause:
    sql: str
    params: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class Predicate:
    # column is always a fixed SQL expression chosen by the query builder, never caller input
    column: str
    comparator: Comparator
    value: Any
    escape: Optional[str] = None

    def to_clause(self, position: int) -> SearchClause:
        return SearchClause(
            sql="{column} {comparator} {placeholder}{escape}".format(
                column=self.column,
                comparator=self.comparator.value,
                placeholder=placeholder(position),
                escape="" if self.escape is None else f" ESCAPE '{self.escape}'",
            ),
            params=[self.value],
        )


def placeholder(position: int) -> str:
    """Positional parameter marker for the 1-indexed parameter ``position``."""
    return _param_placeholder.format(position=position)
