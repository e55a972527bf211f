import administration.urls
import content.urls
import django.contrib.auth.views
import googleads.urls
from django.conf import settings
from django.contrib import admin
from django.urls import include
from django.urls import path


urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include(content.urls)),
    path("administration/", include(administration.urls)),
    path("administration/config/content/googleads/", include(googleads.urls)),
    path("i18n/", include(("django.conf.urls.i18n", "i18n"), namespace="i18n")),
    path(
        "login/",
        django.contrib.auth.views.LoginView.as_view(template_name="login.html"),
        name="login",
    ),
    path("logout/", django.contrib.auth.views.logout_then_login, name="logout"),
]

if settings.PROMETHEUS_ENABLED:
    # Include prometheus metrics at /metrics
    urlpatterns.append(path("", include("django_prometheus.urls")))
