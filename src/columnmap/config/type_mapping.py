"""
Configuration for column type mapping overrides.
"""
import json
import logging
import pathlib

from columnmap.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LOCATIONS = (
    '~/.config/columnmap/type_mapping.json',
    '/etc/columnmap/type_mapping.json',
    'type_mapping.json',  # Current directory
    )

SECTIONS = ('types', 'builder', 'columns')


class TypeMappingConfig:
    """Configuration for custom type mappings

    Holds three override tables:
    - types: sql type -> Go storage type name
    - builder: sql type -> builder type tag name
    - columns: 'table.column' or 'column' -> Go storage type name
    """

    _instance = None

    @classmethod
    def get_instance(cls):
        """Get singleton instance loaded from the default locations"""
        if cls._instance is None:
            config = cls()
            config.load_default_config()
            cls._instance = config
        return cls._instance

    @classmethod
    def reset_instance(cls):
        cls._instance = None

    def __init__(self, config_file=None):
        self._mappings = {section: {} for section in SECTIONS}
        if config_file:
            self.load_config(config_file)

    def load_default_config(self):
        """Load the first existing default configuration file, if any"""
        for location in DEFAULT_LOCATIONS:
            path = pathlib.Path(location).expanduser()
            if not path.exists():
                continue
            try:
                self.load_config(path)
            except ConfigurationError as e:
                logger.warning(f'Ignoring type mapping config {path}: {e}')
            break

    def load_config(self, config_file):
        """Load configuration from file, merging into existing mappings"""
        try:
            with pathlib.Path(config_file).open() as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f'Failed to load type mapping config {config_file}: {e}') from e

        if not isinstance(config, dict):
            raise ConfigurationError(f'Type mapping config {config_file} must be a JSON object')

        for section, mappings in config.items():
            if section not in self._mappings:
                raise ConfigurationError(f'Unknown type mapping section: {section}')
            if not isinstance(mappings, dict):
                raise ConfigurationError(f'Section {section} must map names to types')
            if section == 'builder':
                for sql_type, tag in mappings.items():
                    self.add_builder_mapping(sql_type, tag)
            elif section == 'columns':
                for key, storage_type in mappings.items():
                    self._mappings[section][key.lower()] = storage_type
            else:
                self._mappings[section].update(mappings)

        logger.info(f'Loaded type mapping configuration from {config_file}')

    def get_storage_type(self, sql_type):
        """Get configured storage type name for an sql type"""
        return self._mappings['types'].get(sql_type)

    def get_builder_type(self, sql_type):
        """Get configured builder type for an sql type"""
        return self._mappings['builder'].get(sql_type)

    def get_type_for_column(self, table_name, column_name):
        """Get configured storage type for a specific column"""
        columns = self._mappings['columns']

        # Try with table.column format
        if table_name:
            key = f'{table_name.lower()}.{column_name.lower()}'
            if key in columns:
                return columns[key]

        return columns.get(column_name.lower())

    def add_type_mapping(self, sql_type, storage_type):
        """Add a storage type override for an sql type"""
        self._mappings['types'][sql_type] = storage_type

    def add_builder_mapping(self, sql_type, builder_type):
        """Add a builder type override for an sql type"""
        from columnmap.adapters.type_mapping import BuilderType

        try:
            tag = BuilderType.parse(builder_type)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        self._mappings['builder'][sql_type] = tag

    def add_column_mapping(self, table_name, column_name, storage_type):
        """Add a specific column mapping"""
        key = f'{table_name.lower()}.{column_name.lower()}' if table_name else column_name.lower()
        self._mappings['columns'][key] = storage_type
