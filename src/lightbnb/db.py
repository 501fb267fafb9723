from logging import Logger, getLogger
from time import time
from typing import Any, Dict, Final, List, Optional

from duckdb import DuckDBPyConnection
from duckdb import Error as DuckDBError
from duckdb import connect as duckdb_connect
from fastapi import FastAPI, Request

from lightbnb.errors import QueryExecutionError
from lightbnb.settings import get_settings

_logger: Final[Logger] = getLogger(__name__)
_query_timing_precision: Final[int] = 3
_redacted: Final[str] = "<redacted>"


class Database:
    """Execution client for parameterised statements against a DuckDB connection.

    Every statement runs on its own cursor, so one instance can be shared by request handlers
    running in different threads.
    """

    def __init__(self, connection: DuckDBPyConnection):
        self._connection = connection

    def execute(
        self,
        statement: str,
        params: Optional[List[Any]] = None,
        sensitive: bool = False,
    ) -> None:
        self._run(statement, params, lambda _: None, sensitive)

    def fetchone(
        self,
        statement: str,
        params: Optional[List[Any]] = None,
        sensitive: bool = False,
    ) -> Optional[Dict[str, Any]]:
        def fetch(cursor: DuckDBPyConnection) -> List[Dict[str, Any]]:
            row = cursor.fetchone()
            return [] if row is None else [_row_to_dict(cursor, row)]

        rows = self._run(statement, params, fetch, sensitive)
        return rows[0] if len(rows) > 0 else None

    def fetchall(
        self,
        statement: str,
        params: Optional[List[Any]] = None,
        sensitive: bool = False,
    ) -> List[Dict[str, Any]]:
        return self._run(
            statement,
            params,
            lambda cursor: [_row_to_dict(cursor, row) for row in cursor.fetchall()],
            sensitive,
        )

    def close(self) -> None:
        self._connection.close()

    def _run(self, statement, params, fetch, sensitive):
        # params of sensitive statements (e.g. credentials) are never logged
        logged_params = _redacted if sensitive else params
        start = time()
        cursor = self._connection.cursor()
        try:
            cursor.execute(statement, params)
            result = fetch(cursor)
        except DuckDBError as e:
            _logger.error(
                "SQL failed: {statement}; Params: {params}; {error}".format(
                    statement=statement, params=logged_params, error=e
                )
            )
            raise QueryExecutionError(statement, e) from e
        finally:
            cursor.close()
        _sql_log_message(
            statement,
            time() - start,
            None if result is None else len(result),
            logged_params,
        )
        return result


def connect_to_db(app: FastAPI) -> None:
    settings = get_settings()
    start = time()
    connection = duckdb_connect(
        database=settings.database_uri, read_only=settings.database_read_only
    )
    database = Database(connection)
    if settings.duckdb_threads:
        database.execute(f"SET threads to {int(settings.duckdb_threads)}")
    app.state.database = database
    _logger.info(
        "connected to '{}' in {}s".format(
            settings.database_uri, round(time() - start, _query_timing_precision)
        )
    )


def disconnect_from_db(app: FastAPI) -> None:
    database = getattr(app.state, "database", None)
    if database is not None:
        try:
            database.close()
        except Exception as e:
            _logger.error(e)
        app.state.database = None


def get_database(request: Request) -> Database:
    return request.app.state.database


def _row_to_dict(cursor: DuckDBPyConnection, row: tuple) -> Dict[str, Any]:
    return {
        description[0]: value for description, value in zip(cursor.description, row)
    }


def _sql_log_message(
    statement: str,
    duration: float,
    result_size: Optional[int] = None,
    params: Any = None,
) -> None:
    _logger.debug(
        "SQL: {statement}; Params: {params}; in {time_info}s{result_info}".format(
            statement=statement,
            params=params,
            time_info=round(duration, _query_timing_precision),
            result_info="" if result_size is None else f" {result_size} row(s)",
        )
    )
