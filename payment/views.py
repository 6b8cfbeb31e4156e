from rest_framework import generics

from payment.models import Transaction
from payment.serializers import TransactionSerializer


class TransactionListView(generics.ListAPIView):
    queryset = Transaction.objects.select_related("room").order_by("-date", "-id")
    serializer_class = TransactionSerializer
    filterset_fields = ("method", "room__number")
