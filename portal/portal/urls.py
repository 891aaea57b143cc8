"""portal URL Configuration

"""
from django.conf import settings
from django.urls import path
from django.urls import re_path
from django.urls import include
from django.contrib import admin
from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi
from .views import HealthCheckView
from .views import VersionView

schema_view = get_schema_view(
    openapi.Info(
        title="Mutation Portal API",
        default_version=settings.REST_FRAMEWORK["DEFAULT_VERSION"],
        description="Gene panels, genes and mutation views",
        license=openapi.License(name="Apache License 2.0"),
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
)


urlpatterns = [
    path('', include('webservices.urls', namespace="webservices")),
    path('api/', include('api.urls')),
    path('mutations/', include('mutations.urls', namespace="mutations")),
    re_path(r'^api/docs(?P<format>\.json|\.yaml)$', schema_view.without_ui(cache_timeout=None), name='schema-json'),
    re_path(r'^api/docs/$', schema_view.with_ui('swagger', cache_timeout=None), name='schema-swagger-ui'),
    path('admin/', admin.site.urls),
    path('health_check/', HealthCheckView.as_view(), name="health_check"),
    path('version/', VersionView.as_view(), name="version"),
]

if settings.DEBUG:
    import debug_toolbar
    urlpatterns = [
        path('__debug__/', include(debug_toolbar.urls)),
    ] + urlpatterns
