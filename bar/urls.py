from rest_framework.routers import SimpleRouter

from bar.views import BarProductViewSet, BarSaleViewSet

app_name = "bar"

router = SimpleRouter()
router.register("bar-products", BarProductViewSet, basename="bar-products")
router.register("bar-sales", BarSaleViewSet, basename="bar-sales")

urlpatterns = router.urls
