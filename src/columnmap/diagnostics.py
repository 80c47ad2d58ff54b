"""
Diagnostics for SQL types without a known mapping.

Resolution never fails on an unknown type. Instead a `Diagnostic` is
reported to an optional `DiagnosticCollector` supplied by the caller and
logged as a warning, so processing of the remaining columns continues.
"""
import logging
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

__all__ = ['Diagnostic', 'DiagnosticCollector', 'combine', 'report']

_TARGET_DESCRIPTIONS = {
    'builder': 'column instead for sql builder',
    'storage': 'instead for model type',
    'column': 'instead for sql builder and model type',
    }


@dataclass(frozen=True)
class Diagnostic:
    """Notice that a column's SQL type fell back to a default mapping.
    """
    column: str
    sql_type: str
    udt_name: str
    fallback: str
    target: str

    @property
    def message(self) -> str:
        type_desc = self.sql_type
        if self.target != 'builder' and self.udt_name:
            type_desc = f'{self.sql_type}, {self.udt_name}'
        using = _TARGET_DESCRIPTIONS.get(self.target, f'for {self.target}')
        return f'Unknown sql type: {type_desc}, using {self.fallback} {using}.'

    def __str__(self) -> str:
        return self.message


class DiagnosticCollector:
    """Ordered collection of diagnostics gathered during resolution.
    """

    def __init__(self, log: bool = True) -> None:
        self.log = log
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def report(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic and log it.
        """
        self._diagnostics.append(diagnostic)
        if self.log:
            logger.warning(f'{diagnostic.column}: {diagnostic.message}')

    def clear(self) -> None:
        self._diagnostics.clear()

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)


def report(diagnostic: Diagnostic,
           collector: DiagnosticCollector | None = None) -> None:
    """Send a diagnostic to `collector`, or only log it when none is given.
    """
    if collector is not None:
        collector.report(diagnostic)
    else:
        logger.warning(f'{diagnostic.column}: {diagnostic.message}')


def combine(diagnostics: list[Diagnostic]) -> Diagnostic | None:
    """Merge one column's builder and storage notices into a single notice.
    """
    if not diagnostics:
        return None
    if len(diagnostics) == 1:
        return diagnostics[0]
    first = diagnostics[0]
    return Diagnostic(
        column=first.column,
        sql_type=first.sql_type,
        udt_name=first.udt_name,
        fallback=first.fallback,
        target='column',
        )
