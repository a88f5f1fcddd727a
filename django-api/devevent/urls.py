from django.contrib import admin
from django.urls import include, path

from events.stores.gateway import PersistenceGateway
from events.urls import build_urlpatterns

gateway = PersistenceGateway()

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include(build_urlpatterns(gateway))),
]
