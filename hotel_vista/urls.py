from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("booking.urls", namespace="booking")),
    path("api/", include(("room.urls", "room"), namespace="room")),
    path("api/", include(("hall.urls", "hall"), namespace="hall")),
    path("api/", include(("guest.urls", "guest"), namespace="guest")),
    path("api/", include(("restaurant.urls", "restaurant"), namespace="restaurant")),
    path("api/", include(("bar.urls", "bar"), namespace="bar")),
    path("api/", include(("stock.urls", "stock"), namespace="stock")),
    path("api/", include(("dashboard.urls", "dashboard"), namespace="dashboard")),
    path("api/payments/", include("payment.urls", namespace="payments")),
    path("api/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
