"""Tests for src/config.py."""

import pytest

from src.config import get_invalidation_paths, get_region, get_required_pages, get_stack_name


def test_defaults():
    assert get_region() == "us-east-1"
    assert get_stack_name() == "StaticSiteStack"
    assert get_required_pages() == ["index.html", "403.html"]
    assert get_invalidation_paths() == ["/*"]


def test_region_is_required(monkeypatch):
    monkeypatch.delenv("AWS_DEFAULT_REGION")
    with pytest.raises(RuntimeError, match="AWS_DEFAULT_REGION"):
        get_region()


def test_overrides(monkeypatch):
    monkeypatch.setenv("SITE_STACK_NAME", "TetrisSite")
    monkeypatch.setenv("SITE_REQUIRED_PAGES", "/index.html, 404.html")
    monkeypatch.setenv("SITE_INVALIDATION_PATHS", "index.html,/assets/*")

    assert get_stack_name() == "TetrisSite"
    assert get_required_pages() == ["index.html", "404.html"]
    assert get_invalidation_paths() == ["/index.html", "/assets/*"]
