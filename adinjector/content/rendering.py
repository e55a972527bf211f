"""Render trees for content items and the pipeline that builds them.

A content item is rendered as a ``RenderTree``: named elements, each with a
weight deciding its position among its siblings (lower weights render
first). ``RenderPipeline.build`` creates the base tree for a view mode and
then hands it to every registered ``ContentRenderExtension`` so they can add,
replace or remove elements before the tree is turned into markup.
"""
import logging

from django.urls import reverse
from django.utils.html import format_html
from django.utils.html import linebreaks
from django.utils.safestring import mark_safe
from django.utils.text import Truncator
from django.utils.translation import gettext as _

from . import constants

LOGGER = logging.getLogger(__name__)


class RenderElement:
    """A piece of markup and its ordering weight."""

    def __init__(self, markup="", weight=0):
        self.markup = markup
        self.weight = weight

    def __repr__(self):
        return f"RenderElement(markup={self.markup!r}, weight={self.weight!r})"

    def __eq__(self, other):
        if not isinstance(other, RenderElement):
            return NotImplemented
        return (self.markup, self.weight) == (other.markup, other.weight)


class RenderTree:
    """Weighted collection of the elements a content item is made of."""

    def __init__(self):
        self._elements = {}

    def __setitem__(self, key, element):
        if not isinstance(element, RenderElement):
            raise TypeError(f"Render tree element {key!r} must be a RenderElement")
        self._elements[key] = element

    def __getitem__(self, key):
        return self._elements[key]

    def __delitem__(self, key):
        del self._elements[key]

    def __contains__(self, key):
        return key in self._elements

    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def add(self, key, markup, weight=0):
        element = RenderElement(markup, weight)
        self[key] = element
        return element

    def children(self):
        """Return ``(key, element)`` pairs ordered by weight.

        Elements with the same weight keep the order they were added in.
        """
        return sorted(self._elements.items(), key=lambda item: item[1].weight)

    def render(self):
        return mark_safe(
            "".join(str(element.markup) for key, element in self.children())
        )


class ContentRenderExtension:
    """Capability of altering a content item's render tree.

    Implementations are registered with ``RenderPipeline.register`` and are
    called once for every content item the pipeline builds.
    """

    def node_view(self, node, content, view_mode, langcode, config):
        """Alter ``content``, the ``RenderTree`` of ``node``, in place.

        ``config`` is the site configuration the current request was
        served with.
        """
        raise NotImplementedError


class RenderPipeline:
    def __init__(self):
        self._extensions = []

    @property
    def extensions(self):
        return tuple(self._extensions)

    def register(self, extension):
        if not isinstance(extension, ContentRenderExtension):
            raise TypeError(
                f"{extension!r} does not implement ContentRenderExtension"
            )
        if extension not in self._extensions:
            self._extensions.append(extension)
            LOGGER.debug("Registered render extension %r", extension)
        return extension

    def unregister(self, extension):
        self._extensions.remove(extension)

    def build(self, node, view_mode, langcode, config):
        content = self.base_tree(node, view_mode)
        for extension in self._extensions:
            extension.node_view(node, content, view_mode, langcode, config)
        return content

    def base_tree(self, node, view_mode):
        content = RenderTree()
        if view_mode == constants.VIEW_MODE_TEASER:
            if node.summary:
                summary = node.summary
            else:
                summary = Truncator(node.body).words(constants.TEASER_WORDS)
            content.add(
                constants.BODY_KEY,
                linebreaks(summary, autoescape=True),
                constants.BODY_WEIGHT,
            )
            content.add(
                constants.LINKS_KEY,
                format_html(
                    '<ul class="links"><li><a href="{}">{}</a></li></ul>',
                    reverse("content:node_detail", args=[node.pk]),
                    _("Read more"),
                ),
                constants.LINKS_WEIGHT,
            )
        else:
            content.add(
                constants.BODY_KEY,
                linebreaks(node.body, autoescape=True),
                constants.BODY_WEIGHT,
            )
        return content


pipeline = RenderPipeline()
