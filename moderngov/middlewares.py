"""Django middleware for the ModernGov template page.

Add it to ``MIDDLEWARE``::

    MIDDLEWARE = [
        ...
        "moderngov.middlewares.ModernGovResponseMiddleware",
    ]

Only HTML responses of the template page route are rewritten; everything
else passes through untouched.  The route can be changed with the
``MODERNGOV_TEMPLATE_ROUTE_NAME`` setting.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.conf import settings as django_settings

from moderngov import settings
from moderngov.postprocess import PageFlags, postprocess_page, should_postprocess

if TYPE_CHECKING:
    from collections.abc import Callable

    from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


def _is_html_response(response: HttpResponse) -> bool:
    return (
        not getattr(response, "streaming", False)
        and "text/html" in response.get("Content-Type", "")
    )


def _route_name(request: HttpRequest) -> str | None:
    match = getattr(request, "resolver_match", None)
    return match.view_name if match is not None else None


class ModernGovResponseMiddleware:
    """Rewrite the template page body after the view has rendered it."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response
        self.template_route = getattr(
            django_settings, "MODERNGOV_TEMPLATE_ROUTE_NAME", settings.TEMPLATE_ROUTE_NAME,
        )

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)
        if not should_postprocess(
            _route_name(request), _is_html_response(response), self.template_route,
        ):
            return response

        flags = PageFlags.from_query(request.GET)
        charset = response.charset or "utf-8"

        try:
            scheme_and_host = f"{request.scheme}://{request.get_host()}"
            html = response.content.decode(charset)
            encoded = postprocess_page(html, scheme_and_host, flags).encode(charset)
        except Exception:
            # Never break the page; serve it as rendered.
            logger.exception("Post-processing failed for %s", request.path)
            return response

        response.content = encoded
        if response.has_header("Content-Length"):
            response["Content-Length"] = str(len(encoded))
        logger.debug("Post-processed %s (%s) -> %d bytes", request.path, flags, len(encoded))
        return response
