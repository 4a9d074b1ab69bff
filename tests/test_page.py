"""Tests for the rendered counter page."""

from tapcount.ui import render_page


def test_page_is_self_contained():
    html = render_page()
    assert html.lower().startswith("<!doctype html>")
    assert '<html lang="en">' in html
    assert "<script src" not in html
    assert "stylesheet" not in html


def test_page_has_counter_controls():
    html = render_page()
    assert 'id="count"' in html
    assert 'id="tap"' in html
    assert 'aria-label="Increase count"' in html
    assert 'id="status"' in html


def test_script_is_not_escaped():
    html = render_page()
    assert "fetch(url, options)" in html
    assert "'/api/count'" in html
    assert "&#x27;" not in html


def test_data_file_name_is_shown():
    assert "<code>counter.json</code>" in render_page(data_name="counter.json")
