import httpx


class StubUpstreamClient:
    """httpx.AsyncClient stand-in that records calls and replays one outcome."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else httpx.Response(200, json={})
        self.error = error
        self.calls = []

    async def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def call_count(self):
        return len(self.calls)

    @property
    def last_call(self):
        return self.calls[-1] if self.calls else None


class UpstreamClientBuilder:
    """Factory for configurable upstream stubs."""

    def __init__(self):
        self.response = None
        self.error = None

    def with_json(self, status_code, payload):
        self.response = httpx.Response(status_code, json=payload)
        return self

    def with_text(self, status_code, text):
        self.response = httpx.Response(
            status_code, text=text, headers={"content-type": "text/plain; charset=utf-8"}
        )
        return self

    def with_timeout(self):
        self.error = httpx.ReadTimeout("timed out")
        return self

    def with_error(self, error):
        self.error = error
        return self

    def with_connect_error(self):
        self.error = httpx.ConnectError("connection refused")
        return self

    def build(self):
        return StubUpstreamClient(response=self.response, error=self.error)
