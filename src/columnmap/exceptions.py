"""
Column mapping exception classes.
"""
import psycopg


class MappingError(Exception):
    """Base class for all column mapping errors.
    """


class ValidationError(MappingError):
    """Error in input validation.
    """


class ConfigurationError(MappingError):
    """Error reading or applying a type mapping configuration.
    """


class MetadataError(MappingError):
    """Error querying column metadata from a catalog.
    """


DbConnectionError = (
    psycopg.OperationalError,
    psycopg.InterfaceError,
    MetadataError,
    )
