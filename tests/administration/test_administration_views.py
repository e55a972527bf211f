import pytest
from django.urls import reverse


@pytest.mark.django_db
def test_index_requires_login(client):
    response = client.get(reverse("administration:index"))

    assert response.status_code == 302


@pytest.mark.django_db
def test_index_lists_google_ads_configuration(admin_client):
    response = admin_client.get(reverse("administration:index"))

    assert response.status_code == 200
    items = response.context["items"]
    assert {
        "title": "Google Ads",
        "description": "Configuration for the Google Ads injector.",
        "url": reverse("googleads:settings"),
    } in items
    assert reverse("googleads:settings") in response.content.decode()


@pytest.mark.django_db
def test_index_hides_items_from_users_without_permission(client, django_user_model):
    user = django_user_model.objects.create_user(username="reader", password="reader")
    client.force_login(user)

    response = client.get(reverse("administration:index"))

    assert response.context["items"] == []
