from rest_framework.routers import SimpleRouter

from restaurant.views import MenuItemViewSet, OrderViewSet

app_name = "restaurant"

router = SimpleRouter()
router.register("menu-items", MenuItemViewSet, basename="menu-items")
router.register("orders", OrderViewSet, basename="orders")

urlpatterns = router.urls
