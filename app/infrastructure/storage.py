"""Key-value access to the channel directory table."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import Table, delete, insert, select
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.domain.errors import StorageError

logger = logging.getLogger(__name__)

_ON_CONFLICT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class KeyValueTable:
    """Point writes and prefix queries over a ``(pk, sk)`` keyed table.

    A session is opened for every call and closed before returning; no state
    is kept between calls.
    """

    def __init__(self, session_factory: sessionmaker[Session], table: Table) -> None:
        self.session_factory = session_factory
        self.table = table

    @property
    def name(self) -> str:
        return self.table.name

    def _upsert(self, dialect_name: str, pk: str, sk: str, attributes: dict[str, Any]):
        """Return a single-statement upsert for backends that support one."""

        if dialect_name in _ON_CONFLICT_INSERTS:
            statement = _ON_CONFLICT_INSERTS[dialect_name](self.table).values(
                pk=pk, sk=sk, attributes=attributes
            )
            return statement.on_conflict_do_update(
                index_elements=[self.table.c.pk, self.table.c.sk],
                set_={"attributes": statement.excluded.attributes},
            )
        if dialect_name in ("mysql", "mariadb"):
            statement = mysql.insert(self.table).values(pk=pk, sk=sk, attributes=attributes)
            return statement.on_duplicate_key_update(attributes=statement.inserted.attributes)
        return None

    def put_item(self, pk: str, sk: str, attributes: Mapping[str, Any]) -> None:
        """Store ``attributes`` under ``(pk, sk)``, replacing any existing item."""

        values = dict(attributes)
        session = self.session_factory()
        try:
            with session.begin():
                upsert = self._upsert(session.get_bind().dialect.name, pk, sk, values)
                if upsert is not None:
                    session.execute(upsert)
                else:
                    # No native upsert: replace the row inside one transaction.
                    session.execute(
                        delete(self.table).where(
                            self.table.c.pk == pk, self.table.c.sk == sk
                        )
                    )
                    session.execute(
                        insert(self.table).values(pk=pk, sk=sk, attributes=values)
                    )
        except SQLAlchemyError as exc:
            raise StorageError(f"Unable to write item to table '{self.name}'") from exc
        finally:
            session.close()

    def query(self, pk: str, sk_prefix: str) -> list[dict[str, Any]]:
        """Return the attributes of items under ``pk`` whose sort key starts with ``sk_prefix``.

        Items come back in ascending sort key order.
        """

        statement = (
            select(self.table.c.sk, self.table.c.attributes)
            .where(
                self.table.c.pk == pk,
                self.table.c.sk.startswith(sk_prefix, autoescape=True),
            )
            .order_by(self.table.c.sk)
        )
        session = self.session_factory()
        try:
            rows = session.execute(statement).all()
        except SQLAlchemyError as exc:
            raise StorageError(f"Unable to query table '{self.name}'") from exc
        finally:
            session.close()
        # LIKE is case-insensitive on some backends; prefixes are case-sensitive.
        items = [dict(attributes or {}) for sk, attributes in rows if sk.startswith(sk_prefix)]
        logger.debug("Query on '%s' matched %d items", self.name, len(items))
        return items


__all__ = ["KeyValueTable"]
