from django.urls import path

from googleads import views

app_name = "googleads"
urlpatterns = [
    path("", views.settings_edit, name="settings"),
]
