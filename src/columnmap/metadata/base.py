"""
Sources of column metadata.

A metadata source supplies the ordered columns of a table and the names of
its primary key columns. Column order is the catalog ordinal position.
"""
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from columnmap.adapters.column_info import ColumnMetadata

logger = logging.getLogger(__name__)

__all__ = ['MetadataSource', 'StaticMetadataSource']


class MetadataSource(ABC):
    """Abstract base class for column metadata sources.
    """

    @abstractmethod
    def get_columns(self, catalog: str, schema: str, table: str) -> list[ColumnMetadata]:
        """Get a table's columns ordered by ordinal position.
        """

    @abstractmethod
    def get_primary_keys(self, schema: str, table: str) -> set[str]:
        """Get the names of a table's primary key columns.
        """


class StaticMetadataSource(MetadataSource):
    """In-memory metadata source keyed by (schema, table).

    Useful for generating from metadata captured earlier, and in tests.
    Catalog names are accepted but not checked.
    """

    def __init__(self,
                 tables: Mapping[tuple[str, str], Iterable[ColumnMetadata]],
                 primary_keys: Mapping[tuple[str, str], Iterable[str]] | None = None) -> None:
        self._tables = {key: list(columns) for key, columns in tables.items()}
        self._primary_keys = {key: set(names) for key, names in (primary_keys or {}).items()}

    def get_columns(self, catalog: str, schema: str, table: str) -> list[ColumnMetadata]:
        columns = self._tables.get((schema, table))
        if columns is None:
            logger.debug(f'No columns registered for {schema}.{table}')
            return []
        return list(columns)

    def get_primary_keys(self, schema: str, table: str) -> set[str]:
        return set(self._primary_keys.get((schema, table), ()))
