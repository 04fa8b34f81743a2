# -*- coding: utf-8 -*-
"""
SQLite database access.

All repositories share one Database instance. Queries use ? placeholders
and rows come back as RowProxy objects (dict and attribute access).
"""

import sqlite3
from pathlib import Path
from typing import Optional, List, Any, Dict, Tuple, Iterator
from contextlib import contextmanager

from utils.logger import get_logger

logger = get_logger(__name__)


class RowProxy:
    """
    A dict-like row proxy that supports both dict access and attribute access.
    """

    def __init__(self, data: Dict[str, Any], columns: Optional[List[str]] = None):
        self._data = data
        self._columns = columns or list(data.keys())

    def __getitem__(self, key):
        if isinstance(key, int):
            return self._data[self._columns[key]]
        return self._data[key]

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

    def __contains__(self, key):
        return key in self._data

    def __iter__(self):
        return iter(self._data.values())

    def __len__(self):
        return len(self._data)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def keys(self):
        return self._data.keys()

    def values(self):
        return self._data.values()

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)


class Database:
    """SQLite database wrapper."""

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize database.

        Args:
            db_path: Optional path for the SQLite file. Defaults to Config.DB_PATH.
        """
        if db_path is None:
            from app.config import Config
            db_path = Config.DB_PATH

        self._db_path = Path(db_path)
        self._connection: Optional[sqlite3.Connection] = None

        # Ensure directory exists
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def db_path(self) -> Path:
        """Get database file path."""
        return self._db_path

    def connect(self) -> bool:
        """Establish SQLite connection."""
        try:
            if self._connection is None:
                self._connection = sqlite3.connect(str(self._db_path))
                self._connection.row_factory = self._dict_factory
                self._connection.execute("PRAGMA foreign_keys = ON")
            return True
        except sqlite3.Error as e:
            logger.error(f"SQLite connection error: {e}")
            return False

    @staticmethod
    def _dict_factory(cursor, row):
        """Convert row to dictionary."""
        columns = [col[0] for col in cursor.description]
        return {col: row[idx] for idx, col in enumerate(columns)}

    def _get_connection(self) -> sqlite3.Connection:
        """Get connection, connecting if needed."""
        if not self._connection:
            self.connect()
        return self._connection

    def close(self) -> None:
        """Close SQLite connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("SQLite connection closed")

    def is_connected(self) -> bool:
        return self._connection is not None

    def execute(self, query: str, params: Tuple = ()) -> List[RowProxy]:
        """Execute a statement, commit, and return any result rows."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(query, params or ())
            conn.commit()

            if cursor.description:
                columns = [col[0] for col in cursor.description]
                return [RowProxy(row, columns) for row in cursor.fetchall()]
            return []
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"SQLite execute error: {e}\nQuery: {query}")
            raise
        finally:
            cursor.close()

    def insert(self, query: str, params: Tuple = ()) -> int:
        """Execute an INSERT and return the new row id."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(query, params or ())
            conn.commit()
            return cursor.lastrowid
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"SQLite insert error: {e}\nQuery: {query}")
            raise
        finally:
            cursor.close()

    def fetch_one(self, query: str, params: Tuple = ()) -> Optional[RowProxy]:
        """Fetch single row."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(query, params or ())
            row = cursor.fetchone()
            if row and cursor.description:
                columns = [col[0] for col in cursor.description]
                return RowProxy(row, columns)
            return None
        except sqlite3.Error as e:
            logger.error(f"SQLite fetch_one error: {e}\nQuery: {query}")
            raise
        finally:
            cursor.close()

    def fetch_all(self, query: str, params: Tuple = ()) -> List[RowProxy]:
        """Fetch all rows."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(query, params or ())
            if cursor.description:
                columns = [col[0] for col in cursor.description]
                return [RowProxy(row, columns) for row in cursor.fetchall()]
            return []
        except sqlite3.Error as e:
            logger.error(f"SQLite fetch_all error: {e}\nQuery: {query}")
            raise
        finally:
            cursor.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """
        Transaction context manager.

        Usage:
            with db.transaction() as conn:
                conn.execute(...)
                # commits on success, rolls back on error
        """
        conn = self._get_connection()
        try:
            yield conn
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"SQLite transaction error: {e}")
            raise

    def initialize(self) -> None:
        """Create the schema if it does not exist."""
        logger.info(f"Initializing SQLite database at: {self._db_path}")
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            self._create_tables(cursor)
            conn.commit()
        finally:
            cursor.close()
        logger.info("SQLite database initialized successfully")

    def is_empty(self) -> bool:
        """Check if database has no customers."""
        result = self.fetch_one("SELECT COUNT(*) as count FROM customers")
        return result["count"] == 0 if result else True

    def _create_tables(self, cursor) -> None:
        """Create all database tables."""
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS customers (
                customer_id INTEGER PRIMARY KEY AUTOINCREMENT,
                customer_number TEXT UNIQUE NOT NULL,
                first_name TEXT NOT NULL,
                last_name TEXT NOT NULL,
                email TEXT,
                position TEXT,
                company_name TEXT,
                business_name TEXT,
                billing_details TEXT,
                website TEXT,
                phone_number TEXT,
                mobile_number TEXT,
                extension_number TEXT,
                street_address TEXT,
                city TEXT,
                state TEXT,
                zip_code TEXT,
                created_at TEXT,
                updated_at TEXT
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS technicians (
                technician_id INTEGER PRIMARY KEY AUTOINCREMENT,
                first_name TEXT NOT NULL,
                last_name TEXT NOT NULL,
                legal_name TEXT,
                email TEXT,
                credentials TEXT,
                credential_level TEXT,
                coverage_area TEXT,
                pay_type TEXT,
                account_info TEXT,
                address TEXT,
                city TEXT,
                state TEXT,
                zip_code TEXT,
                notes TEXT,
                created_at TEXT,
                updated_at TEXT
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS service_requests (
                job_id INTEGER PRIMARY KEY AUTOINCREMENT,
                ref_no TEXT,
                customer_id INTEGER NOT NULL REFERENCES customers(customer_id),
                description TEXT NOT NULL,
                service_type TEXT,
                priority TEXT,
                service_date TEXT NOT NULL,
                start_time TEXT,
                end_time TEXT,
                building_name TEXT,
                service_address TEXT,
                service_city TEXT,
                service_state TEXT,
                service_zip TEXT,
                poc_name TEXT,
                poc_phone TEXT,
                access_information TEXT,
                service_cost REAL DEFAULT 0,
                added_cost REAL DEFAULT 0,
                parking_fees REAL DEFAULT 0,
                cost_notes TEXT,
                service_notes TEXT,
                status TEXT DEFAULT 'Pending',
                technician_status TEXT,
                technician_notes TEXT,
                created_at TEXT,
                updated_at TEXT
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS service_request_technicians (
                job_id INTEGER NOT NULL REFERENCES service_requests(job_id) ON DELETE CASCADE,
                technician_id INTEGER NOT NULL REFERENCES technicians(technician_id),
                PRIMARY KEY (job_id, technician_id)
            )
        """)

        cursor.execute(
            "CREATE INDEX IF NOT EXISTS idx_service_requests_customer "
            "ON service_requests(customer_id)"
        )
        cursor.execute(
            "CREATE INDEX IF NOT EXISTS idx_service_requests_date "
            "ON service_requests(service_date)"
        )
