"""Table and column declarations.

A column gets its value through one of three bindings:

- FromField: a dotted attribute path into the row's item
- FromTransform: a pure function of the row
- FromHydrate: a function of the row that may call AWS

Columns without a binding read the item attribute of the same name.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar, Union, TYPE_CHECKING

from pydantic import BaseModel

from ..models.base import AWSModel

if TYPE_CHECKING:
    from .context import QueryContext

T = TypeVar("T", bound=BaseModel)


class ColumnType(str, Enum):
    STRING = "string"
    TIMESTAMP = "timestamp"
    JSON = "json"
    INT = "int"
    BOOL = "bool"


@dataclass(frozen=True)
class Row(Generic[T]):
    """A typed item together with where it came from."""

    item: T
    region: str
    ctx: "QueryContext"


@dataclass(frozen=True)
class FromField:
    path: str

    def resolve(self, row: Row) -> Any:
        value: Any = row.item
        for part in self.path.split("."):
            if value is None:
                return None
            value = getattr(value, part, None)
        return value


@dataclass(frozen=True)
class FromTransform:
    fn: Callable[[Row], Any]

    def resolve(self, row: Row) -> Any:
        return self.fn(row)


@dataclass(frozen=True)
class FromHydrate:
    fn: Callable[[Row], Any]

    def resolve(self, row: Row) -> Any:
        return self.fn(row)


Binding = Union[FromField, FromTransform, FromHydrate]


@dataclass(frozen=True)
class Column:
    name: str
    type: ColumnType
    description: str = ""
    binding: Optional[Binding] = None

    def resolve(self, row: Row) -> Any:
        binding = self.binding or FromField(self.name)
        return to_column_value(binding.resolve(row))


def to_column_value(value: Any) -> Any:
    """Convert models nested in a value back to the provider's JSON shape."""
    if isinstance(value, AWSModel):
        return value.to_dict()
    if isinstance(value, list):
        return [to_column_value(v) for v in value]
    return value


# List(ctx, region) streams items through ctx.stream_list_item
ListHydrate = Callable[["QueryContext", str], None]
# Get(ctx, region) returns the item for the key qualifier, or None
GetHydrate = Callable[["QueryContext", str], Optional[BaseModel]]
ErrorPredicate = Callable[[Exception], bool]


@dataclass(frozen=True)
class ListConfig:
    hydrate: ListHydrate


@dataclass(frozen=True)
class GetConfig:
    key_column: str
    hydrate: GetHydrate
    ignore_error: Optional[ErrorPredicate] = None


@dataclass
class Table:
    name: str
    description: str
    columns: list[Column]
    list_config: ListConfig
    get_config: Optional[GetConfig] = None
    get_matrix: Optional[Callable[["QueryContext"], list[str]]] = None
    _index: dict[str, Column] = field(init=False, repr=False)

    def __post_init__(self):
        self._index = {}
        for col in self.columns:
            if col.name in self._index:
                raise ValueError(f"Duplicate column '{col.name}' in {self.name}")
            self._index[col.name] = col

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    def column(self, name: str) -> Optional[Column]:
        return self._index.get(name)

    def build_row(self, row: Row) -> dict:
        return {col.name: col.resolve(row) for col in self.columns}
