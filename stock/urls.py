from rest_framework.routers import SimpleRouter

from stock.views import StockItemViewSet

app_name = "stock"

router = SimpleRouter()
router.register("stock-items", StockItemViewSet, basename="stock-items")

urlpatterns = router.urls
