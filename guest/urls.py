from rest_framework.routers import SimpleRouter

from guest.views import GuestViewSet

app_name = "guest"

router = SimpleRouter()
router.register("guests", GuestViewSet, basename="guests")

urlpatterns = router.urls
