import pytest
from common import utils
from content.models import Node


@pytest.fixture
def config():
    return utils.SiteConfiguration()


@pytest.fixture
def node(db):
    return Node.objects.create(
        title="Hello world",
        body="First paragraph.\n\nSecond paragraph.",
        language="en",
    )


@pytest.fixture
def unsaved_node():
    return Node(pk=7, title="Draft", body="Some body text.", language="en")
