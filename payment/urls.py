from django.urls import path

from payment.views import TransactionListView

app_name = "payments"

urlpatterns = [
    path("", TransactionListView.as_view(), name="transaction-list"),
]
