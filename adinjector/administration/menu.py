"""Configuration pages listed on the administration index.

Apps add their pages explicitly, usually from ``AppConfig.ready``::

    menu.register(
        "Google Ads",
        "Configuration for the Google Ads injector.",
        "googleads:settings",
    )
"""
from collections import namedtuple

MenuItem = namedtuple("MenuItem", "title description url_name")

_items = []


def register(title, description, url_name):
    item = MenuItem(title, description, url_name)
    if item not in _items:
        _items.append(item)
    return item


def get_items():
    return sorted(_items, key=lambda item: str(item.title))
