"""
Type resolution system for catalog columns.

This module maps a column's catalog metadata to the three values the model
generator needs:

1. A builder type tag used by the query builder to pick column operators
2. A Go storage type that holds the decoded value
3. A model type, the storage type decorated for nullability

The tables are flat lookups keyed by the catalog's `data_type` text. An SQL
type missing from a table falls back to a string mapping and reports a
`Diagnostic`; resolution itself never fails.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Self

from columnmap.adapters.column_info import ColumnMetadata
from columnmap.config.type_mapping import TypeMappingConfig
from columnmap.diagnostics import Diagnostic, DiagnosticCollector, report
from columnmap.naming import camelize

logger = logging.getLogger(__name__)

__all__ = [
    'BuilderType',
    'StorageType',
    'TypeResolver',
    'BUILDER_TYPES',
    'STORAGE_TYPES',
    'resolve_builder_type',
    'resolve_storage_type',
    'resolve_model_type',
]


class BuilderType(enum.Enum):
    """Logical column kind for the query builder.

    Values are the go-jet column kind names interpolated into generated code.
    """
    Bool = 'Bool'
    Integer = 'Integer'
    Date = 'Date'
    Timestamp = 'Timestamp'
    TimestampWithZone = 'Timestampz'
    Time = 'Time'
    TimeWithZone = 'Timez'
    Float = 'Float'
    String = 'String'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: 'str | BuilderType') -> 'BuilderType':
        """Look up a tag by member name or by value.
        """
        if isinstance(name, cls):
            return name
        if name in cls.__members__:
            return cls[name]
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f'Unknown builder type: {name!r}') from None


@dataclass(frozen=True)
class StorageType:
    """Go type holding a column's decoded value.

    `empty_is_null` marks types where an empty value already stands in for
    NULL, so a nullable column does not get a pointer wrapper.
    """
    name: str
    empty_is_null: bool = False

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_name(cls, name: str) -> Self:
        """Build a storage type from a configured Go type name.
        """
        return cls(name, empty_is_null=name.startswith(('[]', 'map[')))

    def as_model_type(self, nullable: bool) -> str:
        if nullable and not self.empty_is_null:
            return f'*{self.name}'
        return self.name


def _table(*groups):
    table = {}
    for sql_types, value in groups:
        for sql_type in sql_types:
            table[sql_type] = value
    return table


BUILDER_TYPES: dict[str, BuilderType] = _table(
    (('boolean',), BuilderType.Bool),
    (('smallint', 'integer', 'bigint'), BuilderType.Integer),
    (('date',), BuilderType.Date),
    (('timestamp without time zone',), BuilderType.Timestamp),
    (('timestamp with time zone',), BuilderType.TimestampWithZone),
    (('time without time zone',), BuilderType.Time),
    (('time with time zone',), BuilderType.TimeWithZone),
    (('real', 'numeric', 'decimal', 'double precision'), BuilderType.Float),
    (('USER-DEFINED', 'text', 'character', 'character varying', 'bytea',
      'uuid', 'tsvector', 'bit', 'bit varying', 'money', 'json', 'jsonb',
      'xml', 'point', 'interval', 'line', 'ARRAY'), BuilderType.String),
    )

STRING = StorageType('string')
TIME = StorageType('time.Time')
BYTES = StorageType('[]byte', empty_is_null=True)

# USER-DEFINED is resolved from the column's udt_name, not from this table
STORAGE_TYPES: dict[str, StorageType] = _table(
    (('boolean',), StorageType('bool')),
    (('smallint',), StorageType('int16')),
    (('integer',), StorageType('int32')),
    (('bigint',), StorageType('int64')),
    (('date', 'timestamp without time zone', 'timestamp with time zone',
      'time without time zone', 'time with time zone'), TIME),
    (('bytea',), BYTES),
    (('text', 'character', 'character varying', 'tsvector', 'bit',
      'bit varying', 'money', 'json', 'jsonb', 'xml', 'point', 'interval',
      'line', 'ARRAY'), STRING),
    (('real',), StorageType('float32')),
    (('numeric', 'decimal', 'double precision'), StorageType('float64')),
    (('uuid',), StorageType('uuid.UUID')),
    )

FALLBACK_BUILDER_TYPE = BuilderType.String
FALLBACK_STORAGE_TYPE = STRING


class TypeResolver:
    """
    Resolves catalog column types to builder tags and Go types.

    Lookup order for each operation:
    1. Configuration overrides (column override first for storage types)
    2. Built-in tables
    3. String fallback, reported as a Diagnostic

    With the default empty configuration the resolver is a pure function of
    the column.
    """

    def __init__(self, config: TypeMappingConfig | None = None) -> None:
        self.config = config if config is not None else TypeMappingConfig()

    def resolve_builder_type(self, column: ColumnMetadata,
                             diagnostics: DiagnosticCollector | None = None) -> BuilderType:
        """Resolve the query builder tag for a column.

        Args:
            column: Column metadata
            diagnostics: Optional collector for unknown-type notices

        Returns
            BuilderType tag, BuilderType.String for unknown sql types
        """
        configured = self.config.get_builder_type(column.sql_type)
        if configured is not None:
            logger.debug(f'Using configured builder type {configured} for {column.name}')
            return configured

        builder_type = BUILDER_TYPES.get(column.sql_type)
        if builder_type is not None:
            return builder_type

        report(Diagnostic(
            column=column.name,
            sql_type=column.sql_type,
            udt_name=column.udt_name,
            fallback='string',
            target='builder',
            ), diagnostics)
        return FALLBACK_BUILDER_TYPE

    def resolve_storage_type(self, column: ColumnMetadata,
                             diagnostics: DiagnosticCollector | None = None,
                             table_name: str | None = None) -> StorageType:
        """Resolve the Go storage type for a column.

        USER-DEFINED columns map to the camel-cased udt_name, which is how
        enum and domain types become generated type references.

        Args:
            column: Column metadata
            diagnostics: Optional collector for unknown-type notices
            table_name: Optional table name for column overrides

        Returns
            StorageType, `string` for unknown sql types
        """
        configured = (self.config.get_type_for_column(table_name, column.name)
                      or self.config.get_storage_type(column.sql_type))
        if configured:
            logger.debug(f'Using configured storage type {configured} for {column.name}')
            return StorageType.from_name(configured)

        # a USER-DEFINED column without a udt_name has no type to reference
        type_name = camelize(column.udt_name) if column.is_user_defined else ''
        if type_name:
            return StorageType(type_name)

        storage_type = STORAGE_TYPES.get(column.sql_type)
        if storage_type is not None:
            return storage_type

        report(Diagnostic(
            column=column.name,
            sql_type=column.sql_type,
            udt_name=column.udt_name,
            fallback=FALLBACK_STORAGE_TYPE.name,
            target='storage',
            ), diagnostics)
        return FALLBACK_STORAGE_TYPE

    def resolve_model_type(self, column: ColumnMetadata,
                           diagnostics: DiagnosticCollector | None = None,
                           table_name: str | None = None) -> str:
        """Resolve the storage type with nullability decoration.

        Nullable columns get a pointer type unless the storage type already
        represents absence by being empty (e.g. []byte).
        """
        storage_type = self.resolve_storage_type(column, diagnostics, table_name)
        return storage_type.as_model_type(column.is_nullable)


_default_resolver = TypeResolver()


def resolve_builder_type(column: ColumnMetadata,
                         diagnostics: DiagnosticCollector | None = None) -> BuilderType:
    """Resolve the query builder tag for a column using the built-in tables.
    """
    return _default_resolver.resolve_builder_type(column, diagnostics)


def resolve_storage_type(column: ColumnMetadata,
                         diagnostics: DiagnosticCollector | None = None) -> StorageType:
    """Resolve the Go storage type for a column using the built-in tables.
    """
    return _default_resolver.resolve_storage_type(column, diagnostics)


def resolve_model_type(column: ColumnMetadata,
                       diagnostics: DiagnosticCollector | None = None) -> str:
    """Resolve the nullability-decorated Go type for a column.
    """
    return _default_resolver.resolve_model_type(column, diagnostics)
