"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import django
import pytest
from django.conf import settings as django_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure() -> None:
    if not django_settings.configured:
        django_settings.configure(
            ALLOWED_HOSTS=["testserver", "www.example.org"],
            DEFAULT_CHARSET="utf-8",
            USE_TZ=True,
        )
        django.setup()


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def template_page_html() -> str:
    return _read_fixture("template_page.html")


@pytest.fixture
def header_page_html() -> str:
    return (
        '<html><head><link rel="stylesheet" href="a.css"><script src="s0.js"></script></head>'
        '<body><script src="s1.js"></script><header>H</header><script src="s2.js"></script>'
        "</body></html>"
    )


@pytest.fixture
def footer_page_html() -> str:
    return (
        "<html><head></head><body><main>M</main>"
        '<footer>F</footer><script src="s3.js"></script></body></html>'
    )
