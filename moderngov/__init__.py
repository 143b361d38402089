"""moderngov - post-process the rendered ModernGov template page.

Quick usage::

    from moderngov import PageFlags, postprocess_page

    page = postprocess_page(html, "https://www.example.org")
    header = postprocess_page(html, "https://www.example.org", PageFlags(header=True))

Django integration::

    MIDDLEWARE = [
        ...
        "moderngov.middlewares.ModernGovResponseMiddleware",
    ]
"""

from moderngov.dom import to_dom, to_html
from moderngov.extractors import (
    absolutize,
    empty_main_content,
    extract_markup,
    full_document,
    prepare_footer,
    prepare_header,
)
from moderngov.postprocess import PageFlags, postprocess_page, should_postprocess

__version__ = "0.1.0"
__all__ = [
    "PageFlags",
    "absolutize",
    "empty_main_content",
    "extract_markup",
    "full_document",
    "postprocess_page",
    "prepare_footer",
    "prepare_header",
    "should_postprocess",
    "to_dom",
    "to_html",
]
