"""
Struct tag annotations for generated model fields.
"""
from typing import Self

from columnmap.adapters.column_info import ColumnMetadata

__all__ = ['AnnotationBuilder', 'build_annotation', 'PRIMARY_KEY']

PRIMARY_KEY = 'primary_key'


class AnnotationBuilder:
    """Accumulates `sql` struct tag keywords in insertion order.

    >>> AnnotationBuilder().add('primary_key').render()
    '`sql:"primary_key"`'
    """

    def __init__(self) -> None:
        self._keywords: list[str] = []

    @property
    def keywords(self) -> list[str]:
        return list(self._keywords)

    def add(self, keyword: str) -> Self:
        if keyword not in self._keywords:
            self._keywords.append(keyword)
        return self

    def render(self) -> str:
        """Render the struct tag, or an empty string when no keywords were added.
        """
        if not self._keywords:
            return ''
        return f'`sql:"{",".join(self._keywords)}"`'


def build_annotation(column: ColumnMetadata, is_primary_key: bool) -> str:
    """Build the struct tag for a column's generated model field.

    Whether the column is part of the primary key comes from the caller,
    usually from the metadata source's constraint lookup.
    """
    builder = AnnotationBuilder()
    if is_primary_key:
        builder.add(PRIMARY_KEY)
    return builder.render()
