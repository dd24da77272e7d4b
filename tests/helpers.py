"""Canned HTTP routes for httpx.MockTransport."""

import httpx

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF\n"
BASE_URL = "https://www.nclonline.com"


def pdf(body: bytes = PDF_BYTES, content_type: str = "application/pdf"):
    return 200, {"content-type": content_type}, body


def html(body: str, status: int = 200):
    return status, {"content-type": "text/html; charset=utf-8"}, body.encode()


class RecordingHandler:
    """MockTransport handler serving canned (status, headers, body) routes.

    A route may also be an httpx exception class, raised for that URL.
    Unknown URLs get a 404.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, type) and issubclass(route, Exception):
            raise route(f"simulated failure for {url}", request=request)
        status, headers, body = route
        return httpx.Response(status, headers=headers, content=body)
