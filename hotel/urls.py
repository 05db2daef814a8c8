from rest_framework.routers import SimpleRouter

from hotel.views import HotelViewSet

app_name = "hotel"

router = SimpleRouter(trailing_slash=False)
router.register("hotels", HotelViewSet, basename="hotels")

urlpatterns = router.urls
