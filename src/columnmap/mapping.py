"""
Column mapping pipeline.

Combines type resolution and annotation building into one record per
column, in catalog order, for the model generator to interpolate.
"""
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from columnmap.adapters.annotation import build_annotation
from columnmap.adapters.column_info import ColumnMetadata
from columnmap.adapters.type_mapping import BuilderType, StorageType
from columnmap.adapters.type_mapping import TypeResolver
from columnmap.diagnostics import DiagnosticCollector, combine, report
from columnmap.metadata.base import MetadataSource

logger = logging.getLogger(__name__)

__all__ = ['ColumnMapping', 'map_column', 'map_columns', 'map_table']


@dataclass(frozen=True)
class ColumnMapping:
    """Resolved generator inputs for one column.
    """
    name: str
    builder_type: BuilderType
    storage_type: StorageType
    model_type: str
    annotation: str
    is_primary_key: bool = False


def map_column(column: ColumnMetadata,
               is_primary_key: bool = False,
               resolver: TypeResolver | None = None,
               diagnostics: DiagnosticCollector | None = None,
               table_name: str | None = None) -> ColumnMapping:
    """Resolve builder type, storage and model types and annotation for a column.

    An unknown sql type is reported once for the column, covering both the
    builder and the storage fallback.
    """
    resolver = resolver or TypeResolver()
    notices = DiagnosticCollector(log=False)
    builder_type = resolver.resolve_builder_type(column, notices)
    storage_type = resolver.resolve_storage_type(column, notices, table_name)
    notice = combine(notices.diagnostics)
    if notice is not None:
        report(notice, diagnostics)
    return ColumnMapping(
        name=column.name,
        builder_type=builder_type,
        storage_type=storage_type,
        model_type=storage_type.as_model_type(column.is_nullable),
        annotation=build_annotation(column, is_primary_key),
        is_primary_key=is_primary_key,
        )


def map_columns(columns: Iterable[ColumnMetadata],
                primary_keys: Iterable[str] = (),
                resolver: TypeResolver | None = None,
                diagnostics: DiagnosticCollector | None = None,
                table_name: str | None = None) -> list[ColumnMapping]:
    """Map a sequence of columns, preserving their order.
    """
    resolver = resolver or TypeResolver()
    primary_keys = set(primary_keys)
    return [map_column(column, column.name in primary_keys, resolver,
                       diagnostics, table_name)
            for column in columns]


def map_table(source: MetadataSource, catalog: str, schema: str, table: str,
              resolver: TypeResolver | None = None,
              diagnostics: DiagnosticCollector | None = None) -> list[ColumnMapping]:
    """Read a table's columns and primary keys from `source` and map them.
    """
    columns = source.get_columns(catalog, schema, table)
    if not columns:
        logger.warning(f'No columns found for {catalog}.{schema}.{table}')
        return []
    primary_keys = source.get_primary_keys(schema, table)
    logger.debug(f'Mapping {len(columns)} columns of {schema}.{table}, '
                 f'primary key {sorted(primary_keys)}')
    return map_columns(columns, primary_keys, resolver, diagnostics, table)
