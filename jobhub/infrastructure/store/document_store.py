"""Document store capability backed by SQLAlchemy.

Every collection is stored in its own table. Set fields (``likes``) live in an
association table so that set-add and set-remove are single-row operations,
and counters are incremented with ``UPDATE ... SET col = col + n``; none of the
mutation primitives needs a client-side read-modify-write.

Blocking database work runs on worker threads through :mod:`anyio.to_thread`.
Change events are published on the event loop once a write has committed.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from functools import partial
from typing import Any, Callable, TypeVar
from uuid import uuid4

from anyio import to_thread
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from jobhub.domain.errors import NotFoundError, StoreUnavailableError
from jobhub.infrastructure.models import LikeModel
from jobhub.utils import ensure_app_naive_datetime, now_in_app_timezone

from .channel import (
    CHANGE_ADDED,
    CHANGE_MODIFIED,
    CHANGE_REMOVED,
    ChangeChannel,
    ChangeEvent,
)
from .mutations import FieldMutation, Increment, SetAdd, SetField, SetRemove
from .registry import CollectionSpec, get_collection

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DocumentStore:
    """Keyed documents, ordered queries, atomic mutations and change channels."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._channels: list[ChangeChannel] = []
        self._closed = False

    # ------------------------------------------------------------------ reads

    async def get(self, collection: str, document_id: str) -> Any | None:
        """Return the entity stored under ``document_id`` or ``None``."""

        spec = get_collection(collection)
        return await self._run(partial(self._get_sync, spec, document_id))

    async def query(
        self,
        collection: str,
        parent_id: str | None = None,
        *,
        order_by: str = "created_at",
        descending: bool = False,
    ) -> list[Any]:
        """Return every document of ``collection`` (optionally under ``parent_id``) in order."""

        spec = get_collection(collection)
        return await self._run(
            partial(self._query_sync, spec, parent_id, order_by, descending)
        )

    # ----------------------------------------------------------------- writes

    async def insert(
        self,
        collection: str,
        fields: Mapping[str, Any],
        parent_id: str | None = None,
    ) -> str:
        """Insert a new document and return its generated id."""

        spec = get_collection(collection)
        document_id, scope = await self._run(
            partial(self._insert_sync, spec, dict(fields), parent_id)
        )
        self._publish(ChangeEvent(spec.name, document_id, CHANGE_ADDED, scope))
        return document_id

    async def update(
        self, collection: str, document_id: str, *mutations: FieldMutation
    ) -> None:
        """Apply ``mutations`` to a document in one transaction."""

        if not mutations:
            return
        spec = get_collection(collection)
        scope = await self._run(partial(self._update_sync, spec, document_id, mutations))
        self._publish(ChangeEvent(spec.name, document_id, CHANGE_MODIFIED, scope))

    async def delete(self, collection: str, document_id: str) -> None:
        """Remove a document; children referencing it are left untouched."""

        spec = get_collection(collection)
        scope = await self._run(partial(self._delete_sync, spec, document_id))
        self._publish(ChangeEvent(spec.name, document_id, CHANGE_REMOVED, scope))

    # ---------------------------------------------------------- subscriptions

    def subscribe(self, collection: str, parent_id: str | None = None) -> ChangeChannel:
        """Open a push channel receiving every change inside the scope."""

        if self._closed:
            raise StoreUnavailableError("Document store is closed")
        spec = get_collection(collection)
        if parent_id is not None and spec.parent_field is None:
            raise ValueError(f"Collection '{collection}' has no parent scope")
        channel = ChangeChannel(spec.name, parent_id)
        self._channels.append(channel)
        return channel

    def unsubscribe(self, channel: ChangeChannel) -> None:
        """Close ``channel``; calling it more than once is harmless."""

        channel.close()
        try:
            self._channels.remove(channel)
        except ValueError:
            pass

    @property
    def channel_count(self) -> int:
        return len(self._channels)

    def close(self) -> None:
        """Close every open channel and refuse new subscriptions."""

        self._closed = True
        channels, self._channels = self._channels, []
        for channel in channels:
            channel.close()

    def _publish(self, event: ChangeEvent) -> None:
        for channel in list(self._channels):
            if channel.matches(event):
                channel.push(event)

    # ---------------------------------------------------------------- helpers

    @staticmethod
    async def _run(func: Callable[[], T]) -> T:
        try:
            return await to_thread.run_sync(func)
        except SQLAlchemyError as exc:
            logger.warning("Document store operation failed: %s", exc)
            raise StoreUnavailableError(str(exc)) from exc

    def _get_sync(self, spec: CollectionSpec, document_id: str) -> Any | None:
        with self._session_factory() as session:
            model = session.get(spec.model, document_id)
            if model is None:
                return None
            members = _load_set_members(session, spec, [document_id])
            return spec.to_entity(model, members.get(document_id, {}))

    def _query_sync(
        self,
        spec: CollectionSpec,
        parent_id: str | None,
        order_by: str,
        descending: bool,
    ) -> list[Any]:
        model_cls = spec.model
        statement = select(model_cls)
        if parent_id is not None:
            if spec.parent_field is None:
                raise ValueError(f"Collection '{spec.name}' has no parent scope")
            statement = statement.where(getattr(model_cls, spec.parent_field) == parent_id)
        order_column = getattr(model_cls, order_by)
        if descending:
            statement = statement.order_by(order_column.desc(), model_cls.id.desc())
        else:
            statement = statement.order_by(order_column.asc(), model_cls.id.asc())

        with self._session_factory() as session:
            models = session.scalars(statement).all()
            members = _load_set_members(session, spec, [model.id for model in models])
            return [spec.to_entity(model, members.get(model.id, {})) for model in models]

    def _insert_sync(
        self,
        spec: CollectionSpec,
        fields: dict[str, Any],
        parent_id: str | None,
    ) -> tuple[str, str | None]:
        if spec.parent_field is not None:
            if parent_id is not None:
                fields[spec.parent_field] = parent_id
            if not fields.get(spec.parent_field):
                raise ValueError(f"Documents in '{spec.name}' require '{spec.parent_field}'")
        elif parent_id is not None:
            raise ValueError(f"Collection '{spec.name}' has no parent scope")

        set_values = {name: fields.pop(name) for name in spec.set_fields if name in fields}
        document_id = fields.pop("id", None) or uuid4().hex
        fields["created_at"] = fields.get("created_at") or now_in_app_timezone()
        values = {key: _to_storage(value) for key, value in fields.items()}

        with self._session_factory() as session:
            session.add(spec.model(id=document_id, **values))
            for field_name, members in set_values.items():
                for member in set(members or ()):
                    session.add(_like_row(spec, document_id, field_name, member))
            session.commit()
        scope = fields.get(spec.parent_field) if spec.parent_field else None
        return document_id, scope

    def _update_sync(
        self,
        spec: CollectionSpec,
        document_id: str,
        mutations: Sequence[FieldMutation],
    ) -> str | None:
        model_cls = spec.model
        with self._session_factory() as session:
            model = session.get(model_cls, document_id)
            if model is None:
                raise NotFoundError(f"Document '{document_id}' not found in '{spec.name}'")
            scope = getattr(model, spec.parent_field) if spec.parent_field else None

            for mutation in mutations:
                if isinstance(mutation, (SetAdd, SetRemove)):
                    _require_set_field(spec, mutation.field)
                    if isinstance(mutation, SetAdd):
                        key = (spec.name, document_id, mutation.value)
                        if session.get(LikeModel, key) is None:
                            session.add(_like_row(spec, document_id, mutation.field, mutation.value))
                    else:
                        session.execute(
                            delete(LikeModel).where(
                                LikeModel.collection == spec.name,
                                LikeModel.document_id == document_id,
                                LikeModel.user_id == mutation.value,
                            )
                        )
                elif isinstance(mutation, Increment):
                    column = getattr(model_cls, mutation.field)
                    session.execute(
                        update(model_cls)
                        .where(model_cls.id == document_id)
                        .values({column: column + mutation.by})
                    )
                elif isinstance(mutation, SetField):
                    if mutation.field in spec.set_fields or mutation.field == "id":
                        raise ValueError(f"Field '{mutation.field}' cannot be overwritten")
                    column = getattr(model_cls, mutation.field)
                    session.execute(
                        update(model_cls)
                        .where(model_cls.id == document_id)
                        .values({column: _to_storage(mutation.value)})
                    )
                else:
                    raise TypeError(f"Unsupported mutation {mutation!r}")

            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                if not all(isinstance(mutation, SetAdd) for mutation in mutations):
                    raise
                # A concurrent writer inserted the same members first.
                logger.debug("Set-add on %s/%s already applied", spec.name, document_id)
        return scope

    def _delete_sync(self, spec: CollectionSpec, document_id: str) -> str | None:
        with self._session_factory() as session:
            model = session.get(spec.model, document_id)
            if model is None:
                raise NotFoundError(f"Document '{document_id}' not found in '{spec.name}'")
            scope = getattr(model, spec.parent_field) if spec.parent_field else None
            session.delete(model)
            if spec.set_fields:
                session.execute(
                    delete(LikeModel).where(
                        LikeModel.collection == spec.name,
                        LikeModel.document_id == document_id,
                    )
                )
            session.commit()
        return scope


def _load_set_members(
    session: Session, spec: CollectionSpec, document_ids: Iterable[str]
) -> dict[str, dict[str, frozenset[str]]]:
    ids = list(document_ids)
    if not spec.set_fields or not ids:
        return {}
    rows = session.execute(
        select(LikeModel.document_id, LikeModel.user_id).where(
            LikeModel.collection == spec.name,
            LikeModel.document_id.in_(ids),
        )
    ).all()
    grouped: defaultdict[str, set[str]] = defaultdict(set)
    for document_id, user_id in rows:
        grouped[document_id].add(user_id)
    return {document_id: {"likes": frozenset(users)} for document_id, users in grouped.items()}


def _require_set_field(spec: CollectionSpec, field_name: str) -> None:
    if field_name not in spec.set_fields:
        raise ValueError(f"Field '{field_name}' of '{spec.name}' is not a set")


def _like_row(spec: CollectionSpec, document_id: str, field_name: str, member: str) -> LikeModel:
    _require_set_field(spec, field_name)
    return LikeModel(collection=spec.name, document_id=document_id, user_id=member)


def _to_storage(value: Any) -> Any:
    if isinstance(value, datetime):
        return ensure_app_naive_datetime(value)
    return value


__all__ = ["DocumentStore"]
