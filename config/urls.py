from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('apps.catalog.api.urls')),
    path('', include('apps.catalog.urls')),
]
