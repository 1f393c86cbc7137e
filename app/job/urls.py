from django.urls import include, path
from job.views import JobViewSet
from rest_framework.routers import SimpleRouter

router = SimpleRouter()
# /api/jobs 와 /api/jobs/ 모두 허용
router.trailing_slash = "/?"
router.register(r"jobs", JobViewSet, basename="job")

urlpatterns = [
    path("", include(router.urls)),
]
