import sys
from pathlib import Path

import pytest

# src/ layout: make the package importable without an editable install.
_SRC = str(Path(__file__).resolve().parents[1] / "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from aruaru.llm import LLMResult  # noqa: E402


class FakeLLM:
    """LLMClient stand-in: returns a canned response or raises a canned error."""

    def __init__(self, raw_text: str | None = "", error: Exception | None = None):
        self.raw_text = raw_text
        self.error = error
        self.calls = []

    def complete(self, *, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return LLMResult(provider="fake", model="fake-model", raw_text=self.raw_text)


class RecordingAttemptLogger:
    def __init__(self, error: Exception | None = None):
        self.records = []
        self.error = error

    def record(self, topic, snippets):
        self.records.append((topic, list(snippets)))
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_llm():
    def _factory(raw_text: str | None = "", error: Exception | None = None):
        return FakeLLM(raw_text=raw_text, error=error)

    return _factory


@pytest.fixture
def attempt_sink():
    def _factory(error: Exception | None = None):
        return RecordingAttemptLogger(error=error)

    return _factory


class _Exec:
    def __init__(self, fn):
        self._fn = fn

    def execute(self):
        return self._fn()


class FakeSheetsService:
    """Just enough of the googleapiclient Sheets service for the facade."""

    def __init__(self, titles=("Sheet1",)):
        self.calls = []
        self.titles = list(titles)
        self.values_store = {}

    def spreadsheets(self):
        service = self

        class _Values:
            def get(self, spreadsheetId, range):
                service.calls.append(("values.get", spreadsheetId, range))
                return _Exec(lambda: {"values": service.values_store.get(range, [])})

            def update(self, spreadsheetId, range, valueInputOption, body):
                service.calls.append(("values.update", spreadsheetId, range, body))
                service.values_store[range] = body.get("values", [])
                return _Exec(lambda: {"updated": True})

            def append(self, spreadsheetId, range, valueInputOption, insertDataOption, body):
                service.calls.append(
                    ("values.append", spreadsheetId, range, insertDataOption, body)
                )
                service.values_store.setdefault(range, []).extend(body.get("values", []))
                return _Exec(lambda: {"appended": True})

        class _Spreadsheets:
            def get(self, spreadsheetId, fields=None):
                service.calls.append(("get", spreadsheetId, fields))
                sheets = [
                    {"properties": {"title": t, "sheetId": i}}
                    for i, t in enumerate(service.titles)
                ]
                return _Exec(lambda: {"sheets": sheets})

            def batchUpdate(self, spreadsheetId, body):
                service.calls.append(("batchUpdate", spreadsheetId, body))
                for req in body["requests"]:
                    if "addSheet" in req:
                        service.titles.append(req["addSheet"]["properties"]["title"])
                return _Exec(lambda: {"ok": True})

            def values(self):
                return _Values()

        return _Spreadsheets()


@pytest.fixture
def fake_sheets_service():
    return FakeSheetsService()
