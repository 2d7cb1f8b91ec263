"""Integration tests for the dashboard page and its HTMX form actions."""

import re

HTMX = {"HX-Request": "true"}


def test_index_renders_empty_dashboard(test_client):
    response = test_client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Weather Dashboard" in response.text
    assert 'placeholder="Enter city name"' in response.text
    assert "Add City" in response.text
    assert 'class="card"' not in response.text


def test_add_city_returns_fragment_with_card(test_client):
    response = test_client.post("/cities", data={"city": "Berlin"}, headers=HTMX)

    assert response.status_code == 200
    assert "<html" not in response.text
    assert 'id="dashboard"' in response.text
    assert "<h2>Berlin</h2>" in response.text
    assert "clear sky" in response.text
    assert "☀️" in response.text
    assert "20°C" in response.text
    assert "Feels like: 20°C" in response.text
    assert "11 km/h" in response.text
    assert "55%" in response.text
    assert 'value=""' in response.text


def test_add_city_without_htmx_returns_full_page(test_client):
    response = test_client.post("/cities", data={"city": "Berlin"})

    assert response.status_code == 200
    assert "<html" in response.text
    assert "<h2>Berlin</h2>" in response.text


def test_cards_render_in_insertion_order(test_client):
    for city in ["Oslo", "Berlin", "Paris"]:
        test_client.post("/cities", data={"city": city}, headers=HTMX)

    text = test_client.get("/").text

    assert text.index("<h2>Oslo</h2>") < text.index("<h2>Berlin</h2>") < text.index("<h2>Paris</h2>")


def test_duplicate_city_shows_message(test_client):
    test_client.post("/cities", data={"city": "Paris"}, headers=HTMX)

    response = test_client.post("/cities", data={"city": "paris"}, headers=HTMX)

    assert "City already added" in response.text
    assert response.text.count("<h2>Paris</h2>") == 1
    assert 'value=""' in response.text


def test_unknown_city_shows_message_and_keeps_input(test_client):
    response = test_client.post("/cities", data={"city": "Nowhereville"}, headers=HTMX)

    assert "City not found" in response.text
    assert 'value="Nowhereville"' in response.text
    assert 'class="card"' not in response.text


def test_blank_city_is_ignored(test_client, provider_client):
    response = test_client.post("/cities", data={"city": "   "}, headers=HTMX)

    assert response.status_code == 200
    provider_client.get.assert_not_called()
    assert 'role="alert"' not in response.text


def test_missing_city_field_is_ignored(test_client, provider_client):
    response = test_client.post("/cities", data={}, headers=HTMX)

    assert response.status_code == 200
    provider_client.get.assert_not_called()


def test_city_name_is_escaped(test_client, provider_client):
    response = test_client.post("/cities", data={"city": "<script>alert(1)</script>"}, headers=HTMX)

    assert "<script>alert(1)</script>" not in response.text
    assert "&lt;script&gt;" in response.text


def test_remove_city(test_client):
    test_client.post("/cities", data={"city": "Berlin"}, headers=HTMX)
    test_client.post("/cities", data={"city": "Paris"}, headers=HTMX)

    response = test_client.post("/cities/remove", data={"city": "Berlin"}, headers=HTMX)

    assert "<h2>Berlin</h2>" not in response.text
    assert "<h2>Paris</h2>" in response.text


def test_remove_city_is_case_sensitive(test_client):
    test_client.post("/cities", data={"city": "Berlin"}, headers=HTMX)

    response = test_client.post("/cities/remove", data={"city": "berlin"}, headers=HTMX)

    assert "<h2>Berlin</h2>" in response.text


def test_state_resets_between_app_runs(test_client):
    """A new app run (lifespan) starts with an empty dashboard."""
    from fastapi.testclient import TestClient

    from weather_dashboard.main import app

    test_client.post("/cities", data={"city": "Berlin"}, headers=HTMX)
    assert "<h2>Berlin</h2>" in test_client.get("/").text

    with TestClient(app) as fresh_client:
        assert "<h2>Berlin</h2>" not in fresh_client.get("/").text


def _begin_lookup(test_client):
    state = test_client.app.state.dashboard_state
    assert test_client.portal.call(state.try_begin_fetch)
    return state


def _has_disabled_attribute(html):
    return re.search(r"\sdisabled[\s>=]", html) is not None


def test_form_disables_itself_client_side(test_client):
    text = test_client.get("/").text

    assert 'hx-disabled-elt="find input, find button"' in text
    assert '<span class="label-idle">Add City</span>' in text
    assert '<span class="label-busy">Loading...</span>' in text
    assert not _has_disabled_attribute(text)


def test_page_form_stays_enabled_while_another_lookup_runs(test_client):
    _begin_lookup(test_client)

    text = test_client.get("/").text

    assert not _has_disabled_attribute(text)
    assert 'placeholder="Enter city name"' in text


def test_submit_while_lookup_runs_keeps_input_and_form_enabled(test_client, provider_client):
    _begin_lookup(test_client)

    response = test_client.post("/cities", data={"city": "Paris"}, headers=HTMX)

    assert response.status_code == 200
    provider_client.get.assert_not_called()
    assert 'value="Paris"' in response.text
    assert not _has_disabled_attribute(response.text)
    assert 'role="alert"' not in response.text
    assert "<h2>Paris</h2>" not in response.text


def test_submit_works_again_after_lookup_finishes(test_client, provider_client):
    state = _begin_lookup(test_client)
    test_client.post("/cities", data={"city": "Paris"}, headers=HTMX)

    test_client.portal.call(state.end_fetch)
    response = test_client.post("/cities", data={"city": "Paris"}, headers=HTMX)

    provider_client.get.assert_called_once()
    assert "<h2>Paris</h2>" in response.text
    assert 'value=""' in response.text
    assert not _has_disabled_attribute(response.text)


def test_static_css_served(test_client):
    response = test_client.get("/static/css/dashboard.css")

    assert response.status_code == 200
    assert ".card-grid" in response.text
