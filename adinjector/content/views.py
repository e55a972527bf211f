import logging

from common import utils
from django.shortcuts import get_object_or_404
from django.shortcuts import render
from django.utils.translation import get_language

from . import constants
from .models import Node
from .rendering import pipeline


LOGGER = logging.getLogger(__name__)


def node_list(request):
    config = utils.StoredConfiguration.load()
    langcode = get_language()
    nodes = [
        (node, pipeline.build(node, constants.VIEW_MODE_TEASER, langcode, config))
        for node in Node.active.all()
    ]
    return render(request, "content/node_list.html", {"nodes": nodes})


def node_detail(request, node_id):
    node = get_object_or_404(Node.active, pk=node_id)
    config = utils.StoredConfiguration.load()
    content = pipeline.build(node, constants.VIEW_MODE_FULL, get_language(), config)
    return render(
        request, "content/node_detail.html", {"node": node, "content": content}
    )
