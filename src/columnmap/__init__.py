"""
Type mapping core for a PostgreSQL schema driven Go model generator.

For each catalog column the package derives:
- a query builder type tag (BuilderType)
- a Go storage type and its nullability-decorated model type
- an `sql` struct tag annotation

Columns come from a MetadataSource; results are plain values ready for
interpolation into generated source.
"""
__version__ = '0.1.0'

from columnmap.adapters import AnnotationBuilder, BuilderType, ColumnMetadata
from columnmap.adapters import StorageType, TypeResolver, build_annotation
from columnmap.adapters import resolve_builder_type, resolve_model_type
from columnmap.adapters import resolve_storage_type
from columnmap.config import TypeMappingConfig
from columnmap.diagnostics import Diagnostic, DiagnosticCollector
from columnmap.exceptions import ConfigurationError, DbConnectionError
from columnmap.exceptions import MappingError, MetadataError, ValidationError
from columnmap.mapping import ColumnMapping, map_column, map_columns, map_table
from columnmap.metadata import MetadataSource, PostgresMetadataSource
from columnmap.metadata import StaticMetadataSource
from columnmap.naming import camelize
from columnmap.options import MetadataOptions

__all__ = [
    'ColumnMetadata',
    'BuilderType',
    'StorageType',
    'TypeResolver',
    'resolve_builder_type',
    'resolve_storage_type',
    'resolve_model_type',
    'camelize',
    'AnnotationBuilder',
    'build_annotation',
    'Diagnostic',
    'DiagnosticCollector',
    'ColumnMapping',
    'map_column',
    'map_columns',
    'map_table',
    'MetadataSource',
    'StaticMetadataSource',
    'PostgresMetadataSource',
    'MetadataOptions',
    'TypeMappingConfig',
    'MappingError',
    'ValidationError',
    'ConfigurationError',
    'MetadataError',
    'DbConnectionError',
]
