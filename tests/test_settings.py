from django.conf import settings

from apps.badges.clients import ShieldsBadgeClient
from apps.badges.properties import BadgeBuilderProperties, BadgeColor, BadgeStyle


def test_badge_apps_are_installed():
    assert "apps.badges" in settings.INSTALLED_APPS
    assert "apps.stats" in settings.INSTALLED_APPS


def test_default_badge_properties_match_settings():
    properties = BadgeBuilderProperties.from_settings()

    assert properties.label == settings.NABBLE_BADGE_DEFAULTS["label"]
    assert properties.style is BadgeStyle.FLAT
    assert properties.color_inaccessible is BadgeColor.LIGHTGREY


def test_shields_client_defaults_to_configured_url_and_timeout():
    client = ShieldsBadgeClient()

    assert client.base_url == settings.NABBLE_SHIELDS_URL.rstrip("/")
    assert client.timeout == settings.NABBLE_HTTP_TIMEOUT
