from rest_framework import status
from rest_framework.response import Response

from booking.services.occupancy import ENGAGED_STATUS, vacated_fields
from store.adapter import default_store
from store.exceptions import raise_for_result


class StoreWriteMixin:
    """
    Route viewset writes through the record store.

    ``collection`` names the store collection and ``lookup_field`` doubles as
    the natural key used for conditional updates and deletes. Viewsets that
    set ``occupancy_kind`` drop the guest fields of a stay whenever a write
    moves the record out of Occupied or Booked.
    """

    collection = None
    record_label = "Record"
    occupancy_kind = None
    store = default_store

    def creation_record(self, validated_data) -> dict:
        return dict(validated_data)

    def not_found_message(self, key) -> str:
        return f"{self.record_label} {key} not found."

    def saved_response(self, pk, response_status=status.HTTP_200_OK):
        instance = self.get_queryset().model.objects.get(pk=pk)
        serializer = self.serializer_class(
            instance, context=self.get_serializer_context()
        )
        return Response(serializer.data, status=response_status)

    def with_vacancy(self, instance, changes: dict) -> dict:
        """Clear the stay fields when a write moves the record out of its engaged status."""
        if self.occupancy_kind is None:
            return changes

        engaged = ENGAGED_STATUS[self.occupancy_kind]
        new_status = changes.get("status", instance.status)
        if instance.status == engaged and new_status != engaged:
            return {**vacated_fields(self.occupancy_kind), **changes}
        return changes

    def store_update(self, instance, changes: dict):
        key = getattr(instance, self.lookup_field)
        changes = self.with_vacancy(instance, changes)
        result = self.store.update(self.collection, self.lookup_field, key, changes)
        raise_for_result(result, self.not_found_message(key))
        return self.saved_response(instance.pk)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        record = self.creation_record(serializer.validated_data)
        result = self.store.create(self.collection, record)
        raise_for_result(result)
        return self.saved_response(result.id, status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        return self.store_update(instance, dict(serializer.validated_data))

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        key = getattr(instance, self.lookup_field)
        result = self.store.delete(self.collection, self.lookup_field, key)
        raise_for_result(result, self.not_found_message(key))
        return Response(status=status.HTTP_204_NO_CONTENT)
