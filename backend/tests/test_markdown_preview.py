from __future__ import annotations

from services.markdown_preview import render_markdown


def test_renders_basic_markdown():
    assert render_markdown("*hi* there") == "<p><em>hi</em> there</p>"


def test_keeps_images_with_title():
    html = render_markdown('![a cat](https://example.com/cat.png "Cat")')

    assert "<img" in html
    assert 'src="https://example.com/cat.png"' in html
    assert 'alt="a cat"' in html
    assert 'title="Cat"' in html


def test_strips_script_tags_and_their_content():
    html = render_markdown("before\n\n<script>alert('x')</script>\n\nafter")

    assert "<script" not in html
    assert "alert" not in html
    assert "before" in html and "after" in html


def test_strips_event_handlers():
    html = render_markdown('<p onclick="steal()">click</p>')

    assert "onclick" not in html
    assert "click" in html


def test_links_are_kept():
    html = render_markdown("[docs](https://example.com)")

    assert 'href="https://example.com"' in html
