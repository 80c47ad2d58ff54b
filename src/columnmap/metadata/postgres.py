"""
PostgreSQL metadata source.

Reads column metadata from information_schema and primary key columns from
the pg_index system catalog.
"""
import logging
from typing import Any, Self

import psycopg
from psycopg.rows import dict_row

from columnmap.adapters.column_info import ColumnMetadata
from columnmap.cache import cacheable_metadata, clear_metadata_cache
from columnmap.exceptions import MetadataError
from columnmap.metadata.base import MetadataSource
from columnmap.options import MetadataOptions

logger = logging.getLogger(__name__)

__all__ = ['PostgresMetadataSource', 'COLUMNS_SQL', 'PRIMARY_KEYS_SQL']

COLUMNS_SQL = """
SELECT column_name, is_nullable, data_type, udt_name
FROM information_schema.columns
WHERE table_catalog = %s AND table_schema = %s AND table_name = %s
ORDER BY ordinal_position
"""

PRIMARY_KEYS_SQL = """
select a.attname as column
from pg_index i
join pg_class c on c.oid = i.indrelid
join pg_namespace n on n.oid = c.relnamespace
join pg_attribute a on a.attrelid = i.indrelid and a.attnum = any(i.indkey)
where i.indisprimary and n.nspname = %s and c.relname = %s
"""


class PostgresMetadataSource(MetadataSource):
    """Metadata source backed by a psycopg connection.

    Lookups are cached per source and table; pass `bypass_cache=True` to
    force a fresh catalog query.
    """

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    @classmethod
    def from_options(cls, options: MetadataOptions) -> Self:
        """Open a connection described by `options`.
        """
        try:
            connection = psycopg.connect(**options.conninfo())
        except psycopg.Error as e:
            raise MetadataError(f'Could not connect to {options.hostname}/{options.database}: {e}') from e
        connection.autocommit = True
        logger.debug(f'Connected to {options.hostname}/{options.database}')
        return cls(connection)

    def _fetch(self, sql: str, params: tuple) -> list[dict[str, Any]]:
        try:
            with self.connection.cursor(row_factory=dict_row) as cursor:
                cursor.execute(sql, params)
                return cursor.fetchall()
        except psycopg.Error as e:
            raise MetadataError(f'Metadata query failed for {params}: {e}') from e

    @cacheable_metadata('table_columns')
    def get_columns(self, catalog: str, schema: str, table: str) -> list[ColumnMetadata]:
        """Get a table's columns ordered by ordinal position.
        """
        rows = self._fetch(COLUMNS_SQL, (catalog, schema, table))
        logger.debug(f'Found {len(rows)} columns for {catalog}.{schema}.{table}')
        return [ColumnMetadata.from_catalog_row(row) for row in rows]

    @cacheable_metadata('primary_keys')
    def get_primary_keys(self, schema: str, table: str) -> set[str]:
        """Get the names of a table's primary key columns.
        """
        rows = self._fetch(PRIMARY_KEYS_SQL, (schema, table))
        return {row['column'] for row in rows}

    def clear_cache(self, table: str | None = None) -> None:
        """Drop cached lookups, for one table or all of them.
        """
        clear_metadata_cache(self, table)

    def close(self) -> None:
        self.connection.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
