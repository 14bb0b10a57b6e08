"""
Store Client Service

Table-scoped create/read/update/delete over the SQLAlchemy session.
Ledgers only talk to the database through this module, and only ever see
plain row dicts coming back.
"""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .errors import ConflictError, StoreError

logger = logging.getLogger(__name__)


class In:
    """Set-membership predicate: column IN (values)."""

    def __init__(self, values):
        self.values = list(values)

    def clause(self, column):
        return column.in_(self.values)


class IEquals:
    """Case-insensitive exact match."""

    def __init__(self, text):
        self.text = text

    def clause(self, column):
        return func.lower(column) == self.text.lower()


class IContains:
    """Case-insensitive substring match."""

    def __init__(self, text):
        self.text = text

    def clause(self, column):
        escaped = self.text.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
        return column.ilike(f'%{escaped}%', escape='\\')


class StoreClient:
    """
    Remote store facade.

    Args:
        db: The Flask-SQLAlchemy instance
        tables: Mapping of table name -> model class

    Every call is a single unit of work: it commits on success and rolls
    back on failure, so callers never observe partial writes.
    """

    def __init__(self, db, tables):
        self.db = db
        self.tables = dict(tables)

    # ---- helpers ----

    def _model(self, table):
        model = self.tables.get(table)
        if model is None:
            raise StoreError(f'Unknown table: {table}')
        return model

    def _column(self, model, name):
        column = getattr(model, name, None)
        if column is None or not hasattr(column, 'property'):
            raise StoreError(f'Unknown column: {model.__tablename__}.{name}')
        return column

    def _query(self, table, filters):
        model = self._model(table)
        query = model.query
        for name, value in (filters or {}).items():
            column = self._column(model, name)
            if hasattr(value, 'clause'):
                query = query.filter(value.clause(column))
            elif value is None:
                query = query.filter(column.is_(None))
            else:
                query = query.filter(column == value)
        return model, query

    def _fail(self, action, table, exc):
        self.db.session.rollback()
        if isinstance(exc, IntegrityError):
            logger.warning('%s on %s violated a constraint: %s', action, table, exc.orig)
            raise ConflictError(f'{action} on {table} conflicts with an existing row') from exc
        logger.error('%s on %s failed: %s', action, table, exc)
        raise StoreError(f'{action} on {table} failed: {exc}') from exc

    # ---- operations ----

    def select(self, table, filters=None, order_by=None):
        """Return rows matching all filters, as dicts."""
        model, query = self._query(table, filters)
        for name in order_by or ('id',):
            descending = name.startswith('-')
            column = self._column(model, name.lstrip('-'))
            query = query.order_by(column.desc() if descending else column.asc())
        try:
            return [obj.to_dict() for obj in query.all()]
        except SQLAlchemyError as e:
            self._fail('select', table, e)

    def insert(self, table, row):
        """Insert one row and return it with server-assigned fields."""
        model = self._model(table)
        for name in row:
            self._column(model, name)
        obj = model(**row)
        try:
            self.db.session.add(obj)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self._fail('insert', table, e)
        return obj.to_dict()

    def update(self, table, id, patch):
        """Apply patch to the row with this id. Returns None if there is no such row."""
        model = self._model(table)
        for name in patch:
            self._column(model, name)
        try:
            obj = self.db.session.get(model, id)
            if obj is None:
                return None
            for name, value in patch.items():
                setattr(obj, name, value)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self._fail('update', table, e)
        return obj.to_dict()

    def delete(self, table, id):
        """Delete the row with this id (no-op if already gone)."""
        model = self._model(table)
        try:
            obj = self.db.session.get(model, id)
            if obj is not None:
                self.db.session.delete(obj)
                self.db.session.commit()
        except SQLAlchemyError as e:
            self._fail('delete', table, e)

    def count(self, table, filters=None):
        _, query = self._query(table, filters)
        try:
            return query.count()
        except SQLAlchemyError as e:
            self._fail('count', table, e)
