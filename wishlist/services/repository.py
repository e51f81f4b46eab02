import logging
import threading
from abc import ABC, abstractmethod
from copy import deepcopy
from dataclasses import asdict, fields
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

logger = logging.getLogger(__name__)

Row = TypeVar("Row")


class RowNotFoundError(LookupError):
    def __init__(self, table: str, row_id: str):
        super().__init__(f"{table} row '{row_id}' does not exist")
        self.table = table
        self.row_id = row_id


class DuplicateRowError(ValueError):
    def __init__(self, table: str, row_id: str):
        super().__init__(f"{table} row '{row_id}' already exists")
        self.table = table
        self.row_id = row_id


class RowStoreInterface(ABC, Generic[Row]):
    """Key-value row storage; rows are identified by their ``id`` attribute"""

    @abstractmethod
    def get(self, row_id: str) -> Row:
        """
        Get a row by id.

        Raises:
            RowNotFoundError: No row has this id
        """
        pass

    @abstractmethod
    def list(self, predicate: Optional[Callable[[Row], bool]] = None) -> List[Row]:
        """All rows in insertion order, optionally only those matching ``predicate``"""
        pass

    @abstractmethod
    def insert(self, row: Row) -> Row:
        """
        Store a new row.

        Raises:
            DuplicateRowError: A row with the same id is already stored
        """
        pass

    @abstractmethod
    def update(self, row_id: str, row: Row) -> Row:
        """
        Replace the row stored under ``row_id``.

        Raises:
            RowNotFoundError: No row has this id
        """
        pass


class InMemoryRowStore(RowStoreInterface[Row]):
    """
    Thread-safe in-memory row store.
    Rows are copied on the way in and out, so callers never share state with the store.
    """

    def __init__(self, table: str):
        self.table = table
        self._rows: Dict[str, Row] = {}
        self._lock = threading.Lock()

    def get(self, row_id: str) -> Row:
        with self._lock:
            if row_id not in self._rows:
                raise RowNotFoundError(self.table, row_id)
            return deepcopy(self._rows[row_id])

    def list(self, predicate: Optional[Callable[[Row], bool]] = None) -> List[Row]:
        with self._lock:
            rows = [deepcopy(row) for row in self._rows.values()]
        if predicate is None:
            return rows
        return [row for row in rows if predicate(row)]

    def insert(self, row: Row) -> Row:
        row_id = row.id
        with self._lock:
            if row_id in self._rows:
                raise DuplicateRowError(self.table, row_id)
            self._rows[row_id] = deepcopy(row)
        logger.debug(f"Inserted {self.table} row '{row_id}'")
        return deepcopy(row)

    def update(self, row_id: str, row: Row) -> Row:
        with self._lock:
            if row_id not in self._rows:
                raise RowNotFoundError(self.table, row_id)
            self._rows[row_id] = deepcopy(row)
        logger.debug(f"Updated {self.table} row '{row_id}'")
        return deepcopy(row)


class SQLRowStore(RowStoreInterface[Row]):
    """
    Row store backed by a SQL table.

    Rows are dataclasses whose fields map one to one onto columns of
    ``table`` with the same names. Each call runs in its own session.
    """

    def __init__(self, session_factory: sessionmaker, table, row_type: Type[Row]):
        self.session_factory = session_factory
        self.table = table
        self.row_type = row_type
        self._columns = [f.name for f in fields(row_type)]

    @property
    def name(self) -> str:
        return self.table.__tablename__

    def _to_row(self, record) -> Row:
        return self.row_type(**{column: getattr(record, column) for column in self._columns})

    def _find(self, session, row_id: str):
        record = session.scalars(select(self.table).where(self.table.id == row_id)).first()
        if record is None:
            raise RowNotFoundError(self.name, row_id)
        return record

    def get(self, row_id: str) -> Row:
        with self.session_factory() as session:
            return self._to_row(self._find(session, row_id))

    def list(self, predicate: Optional[Callable[[Row], bool]] = None) -> List[Row]:
        with self.session_factory() as session:
            records = session.scalars(select(self.table).order_by(self.table.seq)).all()
            rows = [self._to_row(record) for record in records]
        if predicate is None:
            return rows
        return [row for row in rows if predicate(row)]

    def insert(self, row: Row) -> Row:
        with self.session_factory() as session:
            session.add(self.table(**asdict(row)))
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                raise DuplicateRowError(self.name, row.id) from e
        logger.debug(f"Inserted {self.name} row '{row.id}'")
        return deepcopy(row)

    def update(self, row_id: str, row: Row) -> Row:
        with self.session_factory() as session:
            record = self._find(session, row_id)
            for column, value in asdict(row).items():
                setattr(record, column, value)
            session.commit()
        logger.debug(f"Updated {self.name} row '{row_id}'")
        return deepcopy(row)
