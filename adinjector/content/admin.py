from django.contrib import admin

from .models import Node


@admin.register(Node)
class NodeAdmin(admin.ModelAdmin):
    list_display = ("title", "language", "published", "created")
    list_filter = ("published", "language")
    search_fields = ("title", "body")
