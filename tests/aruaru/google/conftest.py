import httplib2
import pytest
from googleapiclient.errors import HttpError


@pytest.fixture
def as_http_error():
    """Fixture: factory for a real HttpError with the given status."""

    def _factory(*, status: int, message: str = "error"):
        resp = httplib2.Response({"status": status})
        content = ('{"error": {"message": "%s"}}' % message).encode("utf-8")
        return HttpError(resp, content)

    return _factory
