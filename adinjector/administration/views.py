from django.contrib.auth.decorators import login_required
from django.shortcuts import render
from django.urls import reverse

from . import menu


@login_required
def index(request):
    """List the configuration pages the user is allowed to change."""
    items = []
    if request.user.has_perm("administration.change_settings"):
        items = [
            {
                "title": item.title,
                "description": item.description,
                "url": reverse(item.url_name),
            }
            for item in menu.get_items()
        ]
    return render(request, "administration/index.html", {"items": items})
