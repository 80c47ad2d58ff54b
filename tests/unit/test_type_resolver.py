"""
Tests for type resolution to verify the builder, storage and model type tables.
"""
import logging

import pytest
from columnmap.adapters.column_info import ColumnMetadata
from columnmap.adapters.type_mapping import BuilderType, StorageType
from columnmap.adapters.type_mapping import TypeResolver, resolve_builder_type
from columnmap.adapters.type_mapping import resolve_model_type
from columnmap.adapters.type_mapping import resolve_storage_type
from columnmap.diagnostics import DiagnosticCollector


def column(sql_type, nullable=False, udt_name='', name='col'):
    return ColumnMetadata(name=name, is_nullable=nullable, sql_type=sql_type,
                          udt_name=udt_name)


BUILDER_CASES = [
    ('boolean', BuilderType.Bool),
    ('smallint', BuilderType.Integer),
    ('integer', BuilderType.Integer),
    ('bigint', BuilderType.Integer),
    ('date', BuilderType.Date),
    ('timestamp without time zone', BuilderType.Timestamp),
    ('timestamp with time zone', BuilderType.TimestampWithZone),
    ('time without time zone', BuilderType.Time),
    ('time with time zone', BuilderType.TimeWithZone),
    ('real', BuilderType.Float),
    ('numeric', BuilderType.Float),
    ('decimal', BuilderType.Float),
    ('double precision', BuilderType.Float),
    ('USER-DEFINED', BuilderType.String),
    ('text', BuilderType.String),
    ('character', BuilderType.String),
    ('character varying', BuilderType.String),
    ('bytea', BuilderType.String),
    ('uuid', BuilderType.String),
    ('tsvector', BuilderType.String),
    ('bit', BuilderType.String),
    ('bit varying', BuilderType.String),
    ('money', BuilderType.String),
    ('json', BuilderType.String),
    ('jsonb', BuilderType.String),
    ('xml', BuilderType.String),
    ('point', BuilderType.String),
    ('interval', BuilderType.String),
    ('line', BuilderType.String),
    ('ARRAY', BuilderType.String),
]

STORAGE_CASES = [
    ('boolean', 'bool'),
    ('smallint', 'int16'),
    ('integer', 'int32'),
    ('bigint', 'int64'),
    ('date', 'time.Time'),
    ('timestamp without time zone', 'time.Time'),
    ('timestamp with time zone', 'time.Time'),
    ('time without time zone', 'time.Time'),
    ('time with time zone', 'time.Time'),
    ('bytea', '[]byte'),
    ('text', 'string'),
    ('character', 'string'),
    ('character varying', 'string'),
    ('tsvector', 'string'),
    ('bit', 'string'),
    ('bit varying', 'string'),
    ('money', 'string'),
    ('json', 'string'),
    ('jsonb', 'string'),
    ('xml', 'string'),
    ('point', 'string'),
    ('interval', 'string'),
    ('line', 'string'),
    ('ARRAY', 'string'),
    ('real', 'float32'),
    ('numeric', 'float64'),
    ('decimal', 'float64'),
    ('double precision', 'float64'),
    ('uuid', 'uuid.UUID'),
]


@pytest.mark.parametrize(('sql_type', 'expected'), BUILDER_CASES)
def test_builder_types(sql_type, expected):
    """Test every known sql type maps to its builder tag without diagnostics"""
    diagnostics = DiagnosticCollector()
    assert resolve_builder_type(column(sql_type), diagnostics) is expected
    assert len(diagnostics) == 0


@pytest.mark.parametrize(('sql_type', 'expected'), STORAGE_CASES)
def test_storage_types(sql_type, expected):
    """Test every known sql type maps to its Go storage type without diagnostics"""
    diagnostics = DiagnosticCollector()
    assert resolve_storage_type(column(sql_type), diagnostics).name == expected
    assert len(diagnostics) == 0


def test_builder_type_values():
    """Test builder tags render as go-jet column kinds"""
    assert str(BuilderType.TimestampWithZone) == 'Timestampz'
    assert str(BuilderType.TimeWithZone) == 'Timez'
    assert str(BuilderType.Integer) == 'Integer'


def test_sql_type_lookup_is_case_sensitive():
    """Test that catalog type names only match in their exact case"""
    diagnostics = DiagnosticCollector()
    assert resolve_builder_type(column('INTEGER'), diagnostics) is BuilderType.String
    assert len(diagnostics) == 1


def test_user_defined_storage_type():
    """Test USER-DEFINED columns reference the camel-cased udt name"""
    col = column('USER-DEFINED', udt_name='order_status')
    assert resolve_storage_type(col).name == 'OrderStatus'
    assert resolve_builder_type(col) is BuilderType.String


def test_user_defined_without_udt_name_falls_back():
    """Test a USER-DEFINED column with no udt name falls back to string"""
    diagnostics = DiagnosticCollector()
    col = column('USER-DEFINED')
    assert resolve_storage_type(col, diagnostics).name == 'string'
    assert len(diagnostics) == 1


@pytest.mark.parametrize('sql_type', ['hstore', 'cidr', 'inet', 'int4range', 'Integer'])
def test_unknown_types_fall_back_to_string(sql_type):
    """Test unknown sql types fall back to string and report exactly one diagnostic each"""
    diagnostics = DiagnosticCollector()
    col = column(sql_type)

    assert resolve_builder_type(col, diagnostics) is BuilderType.String
    assert len(diagnostics) == 1

    assert resolve_storage_type(col, diagnostics) == StorageType('string')
    assert len(diagnostics) == 2

    builder_notice, storage_notice = diagnostics
    assert builder_notice.target == 'builder'
    assert storage_notice.target == 'storage'
    assert sql_type in builder_notice.message
    assert sql_type in storage_notice.message


def test_unknown_type_without_collector_logs(caplog):
    """Test that unknown types are logged when no collector is supplied"""
    with caplog.at_level(logging.WARNING):
        assert resolve_builder_type(column('hstore', name='attrs')) is BuilderType.String
    assert 'hstore' in caplog.text
    assert 'attrs' in caplog.text


class TestModelType:
    """Tests for nullability decoration of storage types"""

    def test_not_nullable(self):
        assert resolve_model_type(column('integer')) == 'int32'

    def test_nullable(self):
        assert resolve_model_type(column('integer', nullable=True)) == '*int32'
        assert resolve_model_type(column('text', nullable=True)) == '*string'
        assert resolve_model_type(column('uuid', nullable=True)) == '*uuid.UUID'

    def test_nullable_enum(self):
        col = column('USER-DEFINED', nullable=True, udt_name='order_status')
        assert resolve_model_type(col) == '*OrderStatus'

    def test_byte_sequence_is_not_wrapped(self):
        """Test []byte stays undecorated because empty stands in for NULL"""
        assert resolve_model_type(column('bytea', nullable=True)) == '[]byte'
        assert resolve_model_type(column('bytea')) == '[]byte'

    @pytest.mark.parametrize(('sql_type', 'expected'), STORAGE_CASES)
    def test_nullable_decoration_matches_storage(self, sql_type, expected):
        storage = resolve_storage_type(column(sql_type))
        model = resolve_model_type(column(sql_type, nullable=True))
        if storage.empty_is_null:
            assert model == expected
        else:
            assert model == f'*{expected}'


class TestEndToEnd:
    """Scenarios covering all three resolvers for one column"""

    def test_integer(self):
        col = column('integer')
        assert resolve_builder_type(col) is BuilderType.Integer
        assert resolve_storage_type(col).name == 'int32'
        assert resolve_model_type(col) == 'int32'

    def test_nullable_varchar(self):
        col = column('character varying', nullable=True)
        assert resolve_builder_type(col) is BuilderType.String
        assert resolve_storage_type(col).name == 'string'
        assert resolve_model_type(col) == '*string'

    def test_enum(self):
        col = column('USER-DEFINED', udt_name='order_status')
        assert resolve_storage_type(col).name == 'OrderStatus'
        assert resolve_builder_type(col) is BuilderType.String

    def test_nullable_bytea(self):
        assert resolve_model_type(column('bytea', nullable=True)) == '[]byte'

    def test_unknown_hstore(self):
        diagnostics = DiagnosticCollector()
        col = column('hstore')
        assert resolve_builder_type(col, diagnostics) is BuilderType.String
        assert resolve_storage_type(col, diagnostics).name == 'string'
        assert len(diagnostics) == 2
        assert all('hstore' in d.message for d in diagnostics)


def test_resolver_instances_are_independent():
    """Test a configured resolver does not affect the module-level functions"""
    resolver = TypeResolver()
    resolver.config.add_type_mapping('hstore', 'map[string]string')

    assert resolver.resolve_storage_type(column('hstore')).name == 'map[string]string'
    assert resolve_storage_type(column('hstore')).name == 'string'


if __name__ == '__main__':
    __import__('pytest').main([__file__])
