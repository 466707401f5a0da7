"""Tests for paper sizing and the layout host."""

import asyncio

import pytest

from typoposter.engine.paper import PaperLayoutHost, compute_height_mm, mm_to_px


def test_height_minimum_for_empty_text():
    assert compute_height_mm("") == 150
    assert compute_height_mm(None) == 150


def test_height_grows_with_text():
    assert compute_height_mm("x" * 20) == 150 + 29


def test_height_is_monotonic_and_bounded():
    heights = [compute_height_mm("x" * n) for n in range(200)]
    assert all(h >= 150 for h in heights)
    assert heights == sorted(heights)


def test_custom_growth():
    assert compute_height_mm("abcd", min_mm=100, mm_per_char=2) == 108


def test_mm_to_px():
    assert mm_to_px(25.4) == pytest.approx(96)
    assert mm_to_px(25.4, px_per_inch=300) == pytest.approx(300)


def test_layout_host_reports_pixel_size():
    host = PaperLayoutHost()
    size = asyncio.run(host.set_canvas_height(150))
    assert size.width_px == 302
    assert size.height_px == 567
    assert host.height_mm == 150
