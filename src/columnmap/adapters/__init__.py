"""
Column adapters package.

This package provides the following components:

- column_info: ColumnMetadata, the per-column catalog record
- type_mapping: builder type, storage type and model type resolution
- annotation: struct tag annotations for generated fields

Resolution functions are total. Unknown sql types fall back to string
mappings and are reported as diagnostics, never raised.
"""

from columnmap.adapters.annotation import *
from columnmap.adapters.column_info import *
from columnmap.adapters.type_mapping import *
