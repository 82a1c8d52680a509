"""
Shared helpers for gql_upload HTTP tests.
"""

import json
from typing import Any, Dict, List

import httpx


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, body: Any = None, text: str = None):
        self.status_code = status_code
        self.body = {"data": {"ok": True}} if body is None else body
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def parse_multipart(request: httpx.Request) -> Dict[str, Dict[str, Any]]:
    """
    Split a multipart request body into parts keyed by field name.

    Each part is {"headers": str, "content": bytes}.
    """
    content_type = request.headers["content-type"]
    boundary = content_type.split("boundary=")[1].encode()
    parts: Dict[str, Dict[str, Any]] = {}
    for chunk in request.content.split(b"--" + boundary):
        chunk = chunk.strip(b"\r\n")
        if not chunk or chunk == b"--":
            continue
        raw_headers, _, content = chunk.partition(b"\r\n\r\n")
        headers = raw_headers.decode()
        name = headers.split('; name="')[1].split('"')[0]
        parts[name] = {"headers": headers, "content": content}
    return parts


def multipart_order(request: httpx.Request) -> List[str]:
    """Field names in body order."""
    body = request.content.decode("latin-1")
    return [segment.split('"')[0] for segment in body.split('; name="')[1:]]


def json_part(parts: Dict[str, Dict[str, Any]], name: str) -> Any:
    return json.loads(parts[name]["content"])
