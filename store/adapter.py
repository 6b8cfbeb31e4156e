"""
Record store used by every dashboard resource.

Views talk to persistence through collection names and natural keys
(room number, hall name, note date) rather than through model classes.
Writes never raise: they return a ``WriteResult`` and, on failure, send
``store.signals.write_failed`` so logging and staff alerts stay decoupled
from the call site.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from django.core.exceptions import FieldDoesNotExist, ValidationError
from django.db import DatabaseError, models, transaction

from store.collections import get_collection
from store.signals import record_written, write_failed
from store.timestamps import to_iso, to_timestamp

logger = logging.getLogger(__name__)

WRITE_ERRORS = (
    DatabaseError,
    FieldDoesNotExist,
    ValidationError,
    TypeError,
    ValueError,
)


@dataclass(frozen=True)
class WriteResult:
    ok: bool
    id: Any = None
    error: Optional[str] = None
    not_found: bool = False


class RecordStore:
    def create(self, collection: str, record: dict) -> WriteResult:
        meta = get_collection(collection)
        try:
            data = self._coerce(meta.model, record)
            with transaction.atomic():
                instance = meta.model.objects.create(**data)
        except WRITE_ERRORS as exc:
            return self._fail(collection, "create", record, exc)

        self._written(collection, "create", instance.pk, data)
        return WriteResult(ok=True, id=instance.pk)

    def update(
            self,
            collection: str,
            match_field: str,
            match_value,
            partial: dict,
    ) -> WriteResult:
        """
        Apply ``partial`` to the record whose ``match_field`` equals
        ``match_value``. Lookup and write happen in one conditional UPDATE.
        """
        meta = get_collection(collection)
        try:
            data = self._coerce(meta.model, partial)
            with transaction.atomic():
                updated = meta.model.objects.filter(
                    **{match_field: match_value}
                ).update(**data)
        except WRITE_ERRORS as exc:
            return self._fail(collection, "update", partial, exc)

        if not updated:
            return self._not_found(collection, "update", match_field, match_value)

        self._written(collection, "update", match_value, data)
        return WriteResult(ok=True)

    def delete(self, collection: str, match_field: str, match_value) -> WriteResult:
        meta = get_collection(collection)
        try:
            with transaction.atomic():
                deleted, _ = meta.model.objects.filter(
                    **{match_field: match_value}
                ).delete()
        except WRITE_ERRORS as exc:
            return self._fail(collection, "delete", {match_field: match_value}, exc)

        if not deleted:
            return self._not_found(collection, "delete", match_field, match_value)

        self._written(collection, "delete", match_value, {})
        return WriteResult(ok=True)

    def list(self, collection: str) -> list[dict]:
        meta = get_collection(collection)
        queryset = meta.model.objects.all().order_by(meta.natural_key)
        if meta.embedded:
            queryset = queryset.prefetch_related(*meta.embedded)

        records = []
        for instance in queryset:
            record = self.to_record(instance)
            for related_name in meta.embedded:
                record[related_name] = [
                    self.to_record(related)
                    for related in getattr(instance, related_name).all()
                ]
            records.append(record)
        return records

    def get_singleton(self, collection: str, key) -> str:
        meta = get_collection(collection)
        try:
            value = (
                meta.model.objects.filter(**{meta.natural_key: key})
                .values_list(meta.value_field, flat=True)
                .first()
            )
        except DatabaseError:
            logger.exception(f"Error fetching '{collection}' entry {key}")
            return ""
        return value or ""

    def set_singleton(self, collection: str, key, value) -> WriteResult:
        meta = get_collection(collection)
        try:
            with transaction.atomic():
                instance, _ = meta.model.objects.update_or_create(
                    **{meta.natural_key: key},
                    defaults={meta.value_field: value},
                )
        except WRITE_ERRORS as exc:
            return self._fail(collection, "set", {meta.natural_key: key}, exc)

        self._written(collection, "set", key, {meta.value_field: value})
        return WriteResult(ok=True, id=instance.pk)

    @staticmethod
    def to_record(instance: models.Model) -> dict:
        return {
            field.name: to_iso(field.value_from_object(instance))
            for field in instance._meta.concrete_fields
        }

    @staticmethod
    def _coerce(model, record: dict) -> dict:
        data = {}
        for name, value in record.items():
            field = model._meta.get_field(name)
            if isinstance(field, models.DateTimeField):
                value = to_timestamp(value)
            data[name] = value
        return data

    def _fail(self, collection, operation, payload, exc) -> WriteResult:
        write_failed.send(
            sender=self.__class__,
            collection=collection,
            operation=operation,
            payload=payload,
            error=exc,
        )
        return WriteResult(ok=False, error=str(exc))

    @staticmethod
    def _not_found(collection, operation, match_field, match_value) -> WriteResult:
        logger.warning(
            f"No '{collection}' record with {match_field}={match_value!r} "
            f"for {operation}"
        )
        return WriteResult(
            ok=False,
            error=f"{collection} record not found",
            not_found=True,
        )

    def _written(self, collection, operation, key, payload) -> None:
        record_written.send(
            sender=self.__class__,
            collection=collection,
            operation=operation,
            key=key,
            payload=payload,
        )


default_store = RecordStore()
