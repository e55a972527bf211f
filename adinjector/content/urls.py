from django.urls import path

from content import views

app_name = "content"
urlpatterns = [
    path("", views.node_list, name="node_list"),
    path("node/<int:node_id>/", views.node_detail, name="node_detail"),
]
