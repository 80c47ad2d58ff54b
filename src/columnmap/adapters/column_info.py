"""
Column metadata as reported by a relational catalog.
"""
import logging
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass
from typing import Any, Self

from columnmap.exceptions import ValidationError

logger = logging.getLogger(__name__)

__all__ = ['ColumnMetadata', 'USER_DEFINED']

USER_DEFINED = 'USER-DEFINED'


@dataclass(frozen=True)
class ColumnMetadata:
    """Schema facts for one column of a table

    Technical implementation details:
    - Immutable value object, one per `information_schema.columns` row
    - `sql_type` is the catalog's `data_type` text (e.g. 'integer', 'ARRAY',
      'USER-DEFINED'); unknown values are valid input
    - `udt_name` is only consulted when `sql_type` is 'USER-DEFINED', where it
      names the enum or domain type backing the column

    Ordering of a table's columns is the catalog ordinal position; nothing in
    this package re-sorts them.
    """
    name: str
    is_nullable: bool
    sql_type: str
    udt_name: str = ''

    def __post_init__(self):
        if not self.name:
            raise ValidationError('column name must not be empty')
        if not self.sql_type:
            raise ValidationError(f'sql type of column {self.name!r} must not be empty')

    @property
    def is_user_defined(self) -> bool:
        return self.sql_type == USER_DEFINED

    @classmethod
    def from_catalog_row(cls, row: Mapping[str, Any] | Sequence[Any]) -> Self:
        """Create a ColumnMetadata from an information_schema.columns row.

        Args:
            row: Mapping with keys column_name, is_nullable, data_type and
                udt_name, or a sequence of those four values in that order

        Returns
            ColumnMetadata instance
        """
        if isinstance(row, Mapping):
            name = row['column_name']
            is_nullable = row['is_nullable']
            sql_type = row['data_type']
            udt_name = row.get('udt_name')
        else:
            name, is_nullable, sql_type, udt_name = row
        return cls(
            name=name,
            is_nullable=is_nullable == 'YES',
            sql_type=sql_type,
            udt_name=udt_name or '',
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.
        """
        return asdict(self)

    @staticmethod
    def get_names(columns: Sequence[Self]) -> list[str]:
        """Get column names from a sequence of ColumnMetadata objects.
        """
        return [col.name for col in columns]

    @staticmethod
    def get_column_by_name(columns: Sequence[Self], name: str) -> Self | None:
        """Find a column by name in a sequence of ColumnMetadata objects.
        """
        for col in columns:
            if col.name == name:
                return col
        return None
