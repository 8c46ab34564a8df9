"""Tests for the HTTP surface: routes, status codes, bodies and headers."""

import pytest

from core.greeting import render_greeting
from core.validation import MAX_NAME_LENGTH

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


def assert_security_headers(resp):
    for header, value in SECURITY_HEADERS.items():
        assert resp.headers.get(header) == value, header


class TestSecurityHeaders:
    """Every response carries the hardening headers, whatever its status."""

    @pytest.mark.parametrize(
        "path",
        [
            "/",
            "/health",
            "/wish/web?name=Bob",
            "/wish/text?name=Bob",
            "/wish/text",
            "/wish/text?name=%24",
            "/404",
            "/500",
            "/does/not/exist",
        ],
    )
    def test_headers_present(self, client, path):
        assert_security_headers(client.get(path))

    def test_headers_on_redirect(self, client):
        resp = client.get("/wish/web", follow_redirects=False)
        assert resp.status_code == 303
        assert_security_headers(resp)


class TestHome:
    def test_home_page(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "text/html; charset=utf-8"
        assert 'action="/wish/web"' in resp.text
        assert f'maxlength="{MAX_NAME_LENGTH}"' in resp.text
        assert "https://img.sanweb.info/friend/friend?name=Your-Name" in resp.text

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestWishWeb:
    def test_greeting_page(self, client):
        resp = client.get("/wish/web", params={"name": "John Doe"})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "text/html; charset=utf-8"
        assert "<title>John Doe : Happy Friendship Wishes</title>" in resp.text
        assert "wishes@John Doe:~" in resp.text
        assert "https://testserver/wish/web?name=john-doe" in resp.text
        assert "https://testserver/wish/text" in resp.text

    def test_image_links(self, client):
        resp = client.get("/wish/web", params={"name": "John Doe"})
        image_url = "https://img.sanweb.info/friend/friend?name=john-doe"
        assert f'<img src="{image_url}"' in resp.text
        assert f'href="https://img.sanweb.info/dl/file?url={image_url}"' in resp.text
        assert f'<meta property="og:image" content="{image_url}">' in resp.text

    def test_hyphenated_name(self, client):
        resp = client.get("/wish/web", params={"name": "Mary-Jane"})
        assert resp.status_code == 200
        assert "wishes@Mary Jane:~" in resp.text
        assert "?name=mary-jane" in resp.text

    def test_unicode_name(self, client):
        resp = client.get("/wish/web", params={"name": "José"})
        assert resp.status_code == 200
        assert "wishes@José:~" in resp.text
        assert "/wish/web?name=jose" in resp.text

    def test_markup_is_escaped(self, client):
        resp = client.get("/wish/web", params={"name": "<script>"})
        assert resp.status_code == 200
        assert "&lt;script&gt;" in resp.text
        assert "<script" not in resp.text

    def test_empty_slug_uses_fallback(self, client):
        resp = client.get("/wish/web", params={"name": "!!!"})
        assert resp.status_code == 200
        assert "https://testserver/wish/web?name=friend" in resp.text

    def test_missing_name_redirects_home(self, client):
        resp = client.get("/wish/web", follow_redirects=False)
        assert resp.status_code == 303
        assert resp.headers["location"] == "/"

    def test_empty_name_redirects_home(self, client):
        resp = client.get("/wish/web?name=", follow_redirects=False)
        assert resp.status_code == 303

    def test_missing_name_400_when_redirect_disabled(self, client_factory):
        client = client_factory(redirect_missing_name=False)
        resp = client.get("/wish/web", follow_redirects=False)
        assert resp.status_code == 400
        assert resp.text == "Name is required"

    def test_too_long(self, client):
        resp = client.get("/wish/web", params={"name": "a" * (MAX_NAME_LENGTH + 1)})
        assert resp.status_code == 400
        assert resp.text == "name length must be between 1 and 36 characters"

    def test_whitespace_only(self, client):
        resp = client.get("/wish/web", params={"name": "   "})
        assert resp.status_code == 400
        assert "length" in resp.text

    def test_invalid_chars(self, client):
        resp = client.get("/wish/web", params={"name": "$100"})
        assert resp.status_code == 400
        assert resp.headers["content-type"] == "text/plain; charset=utf-8"
        assert resp.text == "name contains invalid characters"

    def test_public_scheme(self, client_factory):
        client = client_factory(public_scheme="http")
        resp = client.get("/wish/web", params={"name": "Bob"})
        assert "http://testserver/wish/web?name=bob" in resp.text

    def test_custom_image_service(self, client_factory):
        client = client_factory(image_service_url="https://img.example.com/card")
        resp = client.get("/wish/web", params={"name": "Bob"})
        assert "https://img.example.com/card?name=bob" in resp.text


class TestWishText:
    def test_text_body(self, client):
        resp = client.get("/wish/text", params={"name": "John Doe"})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "text/plain; charset=utf-8"
        assert resp.text == (
            render_greeting("John Doe")
            + "\n\n Web View URL: https://testserver/wish/web?name=john-doe\n\n"
        )

    def test_missing_name(self, client):
        resp = client.get("/wish/text")
        assert resp.status_code == 400
        assert resp.text == "Name is required"

    def test_empty_name(self, client):
        resp = client.get("/wish/text?name=")
        assert resp.status_code == 400

    def test_invalid_name(self, client):
        resp = client.get("/wish/text", params={"name": "tab\there"})
        assert resp.status_code == 400
        assert resp.text == "name contains invalid characters"


class TestWishNegotiated:
    def test_html_for_browsers(self, client):
        resp = client.get(
            "/wish",
            params={"name": "John Doe"},
            headers={"Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8"},
        )
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "text/html; charset=utf-8"
        assert "<title>John Doe : Happy Friendship Wishes</title>" in resp.text

    def test_text_otherwise(self, client):
        resp = client.get("/wish", params={"name": "John Doe"}, headers={"Accept": "*/*"})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "text/plain; charset=utf-8"
        assert "\033[" not in resp.text
        assert resp.text.endswith("Web View URL: https://testserver/wish/web?name=john-doe\n\n")

    def test_colored_text(self, client):
        resp = client.get("/wish", params={"name": "John Doe", "color": "1"})
        assert resp.status_code == 200
        assert "\033[" in resp.text

    def test_missing_name(self, client):
        resp = client.get("/wish")
        assert resp.status_code == 400


class TestErrorPages:
    def test_404_page(self, client):
        resp = client.get("/404")
        assert resp.status_code == 404
        assert resp.headers["content-type"] == "text/html; charset=utf-8"
        assert "Page Not Found" in resp.text

    def test_500_page(self, client):
        resp = client.get("/500")
        assert resp.status_code == 500
        assert "Internal Server Error" in resp.text

    def test_unmatched_route(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.headers["content-type"] == "text/html; charset=utf-8"
        assert "Page Not Found" in resp.text
        assert 'href="/"' in resp.text
