# IN THIS FILE: STORING AND FETCHING EXECUTION REPORTS

import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

import psycopg

from robot_cleaner.utils.consts import get_postgres_settings
from robot_cleaner.utils.types import ExecutionReport

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a report cannot be written to or read from a store."""


class ReportStore(ABC):
    """Somewhere to keep execution reports. Ids are assigned by the store."""

    @abstractmethod
    def insert(self, report: ExecutionReport) -> int:
        """Store the report and return its new id."""

    @abstractmethod
    def get(self, report_id: int) -> Optional[ExecutionReport]:
        """Return the report with this id, or None if there isn't one."""


class InMemoryReportStore(ReportStore):
    def __init__(self):
        self._reports: Dict[int, ExecutionReport] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def insert(self, report: ExecutionReport) -> int:
        with self._lock:
            report_id = self._next_id
            self._next_id += 1
            self._reports[report_id] = report.with_id(report_id)
        logger.info("Inserted execution report %d: %s", report_id, report.get_dict())
        return report_id

    def get(self, report_id: int) -> Optional[ExecutionReport]:
        logger.info("Getting execution report with ID: %d", report_id)
        with self._lock:
            return self._reports.get(report_id)


class PostgresReportStore(ReportStore):
    """
    Reports in a single Postgres `executions` table:
        id | timestamp | commands | result | duration

    A connection is opened per operation; psycopg commits when the
    connection block exits cleanly and rolls back otherwise.
    """

    SCHEMA = """
        CREATE TABLE IF NOT EXISTS executions (
            id        SERIAL PRIMARY KEY,
            timestamp TIMESTAMPTZ      NOT NULL,
            commands  INTEGER          NOT NULL,
            result    BIGINT           NOT NULL,
            duration  DOUBLE PRECISION NOT NULL
        )
    """

    def __init__(self, conninfo: str = "", connect: Optional[Callable] = None, **connect_kwargs):
        """
        Args:
            conninfo: libpq connection string or URL, e.g. 'postgresql://user@host/db'
            connect: Connection factory, psycopg.connect unless overridden
            connect_kwargs: Extra connection parameters (host, user, password, dbname)
        """
        self.conninfo = conninfo
        self._connect = connect
        self._connect_kwargs = connect_kwargs

    def _connection(self):
        connect = self._connect or psycopg.connect
        return connect(self.conninfo, **self._connect_kwargs)

    def ensure_schema(self) -> None:
        try:
            with self._connection() as conn:
                conn.execute(self.SCHEMA)
        except psycopg.Error as e:
            raise StorageError(f"Cannot create executions table: {e}") from e

    def insert(self, report: ExecutionReport) -> int:
        logger.info("Inserting execution report into database: %s", report.get_dict())
        try:
            with self._connection() as conn:
                row = conn.execute(
                    "INSERT INTO executions (timestamp, commands, result, duration) "
                    "VALUES (%s, %s, %s, %s) RETURNING id",
                    (report.timestamp, report.commands, report.result, report.duration),
                ).fetchone()
        except psycopg.Error as e:
            raise StorageError(f"Failed to insert execution report: {e}") from e

        if row is None:
            raise StorageError("Insert returned no id for execution report")
        return row[0]

    def get(self, report_id: int) -> Optional[ExecutionReport]:
        logger.info("Getting execution report with ID: %d", report_id)
        try:
            with self._connection() as conn:
                row = conn.execute(
                    "SELECT id, timestamp, commands, result, duration "
                    "FROM executions WHERE id = %s",
                    (report_id,),
                ).fetchone()
        except psycopg.Error as e:
            raise StorageError(f"Failed to read execution report {report_id}: {e}") from e
        return None if row is None else self._parse_row(row)

    @staticmethod
    def _parse_row(row) -> ExecutionReport:
        row_id, timestamp, commands, result, duration = row
        return ExecutionReport(
            timestamp=timestamp,
            commands=commands,
            result=result,
            duration=duration,
            id=row_id,
        )


def create_report_store(url: str) -> ReportStore:
    """
    Build a store from a URL:
        memory                    -> InMemoryReportStore
        postgres                  -> PostgresReportStore from the POSTGRES_* settings
        postgresql://user@host/db -> PostgresReportStore for that URL
    """
    if url == "memory":
        return InMemoryReportStore()
    if url == "postgres":
        store = PostgresReportStore(**get_postgres_settings())
    elif url.startswith(("postgresql://", "postgres://")):
        store = PostgresReportStore(url)
    else:
        raise ValueError(f"Unsupported report store URL: {url!r}")
    store.ensure_schema()
    return store
