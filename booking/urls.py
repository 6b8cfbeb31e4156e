from django.urls import path

from booking.views import BookingListView, BookRoomView

urlpatterns = [
    path("book-room", BookRoomView.as_view(), name="book-room"),
    path("bookings", BookingListView.as_view(), name="booking-list"),
]

app_name = "booking"
