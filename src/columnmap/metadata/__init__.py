"""
Column metadata sources.
"""
from columnmap.metadata.base import MetadataSource, StaticMetadataSource
from columnmap.metadata.postgres import PostgresMetadataSource
