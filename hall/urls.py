from rest_framework.routers import SimpleRouter

from hall.views import HallViewSet

app_name = "hall"

router = SimpleRouter()
router.register("halls", HallViewSet, basename="halls")

urlpatterns = router.urls
