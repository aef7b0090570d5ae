"""Read the active parent/child theme from a project's WordPress database."""

from __future__ import annotations

from typing import Callable, Protocol

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError

from wpgoto.utils.config import DatabaseConfig
from wpgoto.utils.errors import ThemeLookupError

DRIVER = "mysql+pymysql"


class ThemeLookupPort(Protocol):
    """Anything that can answer "which theme does this option name?"."""

    def lookup(self, project: str, option_name: str) -> str: ...


def database_name(project: str) -> str:
    """example.com -> example_com"""
    return project.replace(".", "_")


def build_url(settings: DatabaseConfig, project: str) -> URL:
    return URL.create(
        DRIVER,
        username=settings.user,
        password=settings.password,
        host=settings.host,
        port=settings.port,
        database=database_name(project),
    )


class WordPressOptionsLookup:
    """ThemeLookupPort backed by the site's ``wp_options`` table."""

    def __init__(
        self,
        settings: DatabaseConfig | None = None,
        engine_factory: Callable[..., Engine] = create_engine,
    ) -> None:
        self.settings = settings or DatabaseConfig()
        self._engine_factory = engine_factory

    def _engine(self, project: str) -> Engine:
        return self._engine_factory(
            build_url(self.settings, project),
            connect_args={"connect_timeout": self.settings.connect_timeout},
        )

    def lookup(self, project: str, option_name: str) -> str:
        """Return ``option_value`` for *option_name* in *project*'s database.

        Raises ThemeLookupError if the database is unreachable or the option
        is missing or empty.
        """
        table = self.settings.options_table
        query = text(f"SELECT option_value FROM {table} WHERE option_name = :option_name")
        try:
            engine = self._engine(project)
        except SQLAlchemyError as err:
            raise ThemeLookupError(str(err)) from err

        try:
            with engine.connect() as conn:
                row = conn.execute(query, {"option_name": option_name}).first()
        except SQLAlchemyError as err:
            raise ThemeLookupError(str(getattr(err, "orig", None) or err)) from err
        finally:
            engine.dispose()

        if row is None or not row[0]:
            raise ThemeLookupError(
                f"No '{option_name}' option found in {database_name(project)}.{table}."
            )
        return str(row[0])
