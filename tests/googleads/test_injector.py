import pytest
from common import utils
from content.rendering import RenderTree
from googleads import constants
from googleads.injector import GoogleAdsInjector


@pytest.fixture
def content():
    tree = RenderTree()
    tree.add("body", "<p>body</p>", 0)
    return tree


@pytest.mark.parametrize(
    "view_mode,teasers,expected",
    [
        ("full", 0, True),
        ("full", 1, True),
        ("teaser", 1, True),
        ("teaser", 0, False),
        ("rss", 1, False),
        ("search_index", 0, False),
        ("", 1, False),
    ],
)
def test_ad_block_is_attached_for_full_and_enabled_teasers(
    unsaved_node, content, view_mode, teasers, expected
):
    config = utils.SiteConfiguration({constants.TEASERS_SETTING: teasers})

    GoogleAdsInjector().node_view(unsaved_node, content, view_mode, "en", config)

    assert (constants.CONTENT_KEY in content) is expected


@pytest.mark.parametrize("weight", [-50, -10, 0, 30, 50])
def test_ad_block_weight_is_the_stored_weight(unsaved_node, content, weight):
    config = utils.SiteConfiguration({constants.WEIGHT_SETTING: weight})

    GoogleAdsInjector().node_view(unsaved_node, content, "full", "en", config)

    assert content[constants.CONTENT_KEY].weight == weight


def test_full_view_mode_with_weight_30_adds_one_entry(unsaved_node, content):
    config = utils.SiteConfiguration({constants.WEIGHT_SETTING: 30})

    GoogleAdsInjector().node_view(unsaved_node, content, "full", "en", config)

    assert list(content) == ["body", constants.CONTENT_KEY]
    element = content[constants.CONTENT_KEY]
    assert element.weight == 30
    assert element.markup == constants.GOOGLE_AD_MARKUP
    assert content.render() == "<p>body</p>" + constants.GOOGLE_AD_MARKUP


def test_teaser_without_teasers_setting_leaves_tree_unchanged(unsaved_node, content):
    config = utils.SiteConfiguration({constants.TEASERS_SETTING: 0})

    GoogleAdsInjector().node_view(unsaved_node, content, "teaser", "en", config)

    assert list(content) == ["body"]
    assert content.render() == "<p>body</p>"


def test_missing_settings_fall_back_to_defaults(unsaved_node, content, config):
    injector = GoogleAdsInjector()

    injector.node_view(unsaved_node, content, "full", "en", config)
    assert content[constants.CONTENT_KEY].weight == 50

    teaser = RenderTree()
    injector.node_view(unsaved_node, teaser, "teaser", "en", config)
    assert constants.CONTENT_KEY not in teaser


def test_malformed_settings_fall_back_to_defaults(unsaved_node, content, caplog):
    config = utils.SiteConfiguration(
        {constants.WEIGHT_SETTING: "abc", constants.TEASERS_SETTING: "yes"}
    )

    GoogleAdsInjector().node_view(unsaved_node, content, "full", "en", config)

    assert content[constants.CONTENT_KEY].weight == 50
    assert "Ignoring malformed googleads_weight setting 'abc'" in caplog.text


def test_markup_is_safe_for_templates(unsaved_node, content, config):
    GoogleAdsInjector().node_view(unsaved_node, content, "full", "en", config)

    assert hasattr(content[constants.CONTENT_KEY].markup, "__html__")


def test_injectors_compare_equal():
    assert GoogleAdsInjector() == GoogleAdsInjector()
    assert len({GoogleAdsInjector(), GoogleAdsInjector()}) == 1
