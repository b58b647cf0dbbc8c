import pytest
from markupsafe import Markup

from frontend.api.utils.media import image_url, public_image_url
from frontend.api.utils.rich_text import plain_text, rich_text


@pytest.mark.parametrize(
    "path, expected",
    [
        ("products/a.jpg", "http://api.test/storage/products/a.jpg"),
        ("/storage/products/a.jpg", "http://api.test/storage/products/a.jpg"),
        ("storage/products/a.jpg", "http://api.test/storage/products/a.jpg"),
        ("products\\win\\a.jpg", "http://api.test/storage/products/win/a.jpg"),
        ("https://cdn.example.test/a.jpg", "https://cdn.example.test/a.jpg"),
        ("//cdn.example.test/a.jpg", "//cdn.example.test/a.jpg"),
        ("", ""),
        (None, ""),
    ],
)
def test_image_url(app, path, expected):
    with app.app_context():
        assert image_url(path) == expected


def test_public_image_url_strips_storage_prefix(app):
    with app.app_context():
        assert public_image_url("/storage/sliders/s1.jpg") == "http://media.test/sliders/s1.jpg"
        assert public_image_url("sliders/s1.jpg") == "http://media.test/sliders/s1.jpg"


def test_trailing_slash_in_config_is_removed(fake_api):
    from frontend.app import create_app
    from frontend.config import TestingConfig

    class SlashConfig(TestingConfig):
        API_URL = "http://api.test/  "

    app = create_app(SlashConfig)
    with app.app_context():
        assert image_url("a.jpg") == "http://api.test/storage/a.jpg"


def test_rich_text_keeps_formatting_and_drops_scripts():
    html = rich_text('<p>Soft <strong>cotton</strong></p><script>alert(1)</script>')
    assert isinstance(html, Markup)
    assert "<strong>cotton</strong>" in html
    assert "script" not in html
    assert "alert" not in html


def test_rich_text_links_get_rel_and_lose_javascript():
    html = rich_text('<a href="https://shop.example.test">shop</a><a href="javascript:alert(1)">bad</a>')
    assert 'rel="noopener noreferrer"' in html
    assert "javascript" not in html


def test_rich_text_strips_event_handlers():
    assert "onclick" not in rich_text('<p onclick="steal()">hi</p>')


def test_plain_text():
    assert plain_text("<p>Hello <b>world</b></p>") == "Hello world"
    assert plain_text("<p>Salt &amp; Pepper</p>") == "Salt & Pepper"
    assert plain_text("<p>Salt & Pepper</p>") == "Salt & Pepper"
    assert plain_text(None) == ""
