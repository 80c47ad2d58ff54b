import getpass
import pathlib
import sys
from dataclasses import dataclass
from typing import Any

__all__ = ['MetadataOptions']


def scriptname() -> str | None:
    """Name of the running script without extension, if any."""
    if not sys.argv or not sys.argv[0]:
        return None
    return pathlib.Path(sys.argv[0]).stem or None


@dataclass
class MetadataOptions:
    """Options

    Connection settings for reading column metadata from a PostgreSQL
    catalog. `schema` is the default schema for table lookups.
    """
    hostname: str = None
    username: str = None
    password: str = None
    database: str = None
    port: int = 5432
    timeout: int = 0
    schema: str = 'public'
    appname: str = None

    def __post_init__(self):
        missing = [name for name in self.get_required_options()
                   if not getattr(self, name)]
        if missing:
            raise ValueError(f'missing required options: {missing}')
        if not isinstance(self.port, int) or self.port <= 0:
            raise ValueError(f'port must be a positive integer, got {self.port!r}')
        if self.timeout < 0:
            raise ValueError('timeout must not be negative')
        self.username = self.username or getpass.getuser()
        self.appname = self.appname or scriptname() or 'python_console'

    @classmethod
    def get_required_options(cls) -> list[str]:
        """Return required options for PostgreSQL connections."""
        return ['hostname', 'database']

    def conninfo(self) -> dict[str, Any]:
        """Keyword arguments for `psycopg.connect`.
        """
        params = {
            'host': self.hostname,
            'user': self.username,
            'dbname': self.database,
            'port': self.port,
            'application_name': self.appname,
            }
        if self.password:
            params['password'] = self.password
        if self.timeout:
            params['connect_timeout'] = self.timeout
        return params
