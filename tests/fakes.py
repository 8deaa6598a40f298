"""Stand-ins for outbound HTTP used across the test suite."""

from __future__ import annotations

import json

from requests.structures import CaseInsensitiveDict


_MISSING = object()


class FakeResponse:
    def __init__(self, status_code=200, *, json_body=_MISSING, text="", reason="OK", headers=None):
        if json_body is not _MISSING:
            text = json.dumps(json_body)
            if headers is None:
                headers = {"Content-Type": "application/json"}
        self.status_code = status_code
        self.reason = reason
        self.text = text
        self.headers = CaseInsensitiveDict(headers or {})

    @property
    def content(self) -> bytes:
        return self.text.encode("utf-8")

    def json(self):
        return json.loads(self.text)


class RecordingSession:
    """Records every outbound request and answers from a queue."""

    def __init__(self):
        self.calls = []
        self.responses = []
        self.error = None

    def queue(self, response: FakeResponse) -> None:
        self.responses.append(response)

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return FakeResponse(200, json_body={})

    def close(self):
        pass
