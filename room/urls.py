from rest_framework.routers import SimpleRouter

from room.views import RoomViewSet

app_name = "room"

router = SimpleRouter()
router.register("rooms", RoomViewSet, basename="rooms")

urlpatterns = router.urls
