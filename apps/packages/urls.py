from rest_framework.routers import SimpleRouter
from . import views

router = SimpleRouter(trailing_slash=False)
router.register(r'packages', views.PackageViewSet, basename='package')
router.register(r'admin/packages', views.AdminPackageViewSet, basename='admin-package')

urlpatterns = router.urls
