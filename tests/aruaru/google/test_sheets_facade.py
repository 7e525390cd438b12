from aruaru.google.sheets import SheetsFacade


def test_read_values_stringifies_cells(fake_sheets_service):
    fake_sheets_service.values_store["S!A2:D"] = [["a", 1, None]]
    sheets = SheetsFacade(fake_sheets_service)

    assert sheets.read_values("sid", "S!A2:D") == [["a", "1", ""]]


def test_append_values_inserts_rows(fake_sheets_service):
    sheets = SheetsFacade(fake_sheets_service)

    sheets.append_values("sid", "S!A:D", [["x", "y"]])

    call = fake_sheets_service.calls[-1]
    assert call[0] == "values.append"
    assert call[3] == "INSERT_ROWS"
    assert call[4] == {"values": [["x", "y"]]}


def test_ensure_sheet_exists_adds_sheet_and_headers(fake_sheets_service):
    sheets = SheetsFacade(fake_sheets_service)

    sheets.ensure_sheet_exists("sid", "logs", headers=["id", "topic"])

    assert "logs" in fake_sheets_service.titles
    assert fake_sheets_service.values_store["logs!A1"] == [["id", "topic"]]


def test_ensure_sheet_exists_leaves_existing_headers(fake_sheets_service):
    fake_sheets_service.titles.append("logs")
    fake_sheets_service.values_store["logs!1:1"] = [["id", "topic"]]
    sheets = SheetsFacade(fake_sheets_service)

    sheets.ensure_sheet_exists("sid", "logs", headers=["other"])

    ops = [c[0] for c in fake_sheets_service.calls]
    assert "batchUpdate" not in ops
    assert "values.update" not in ops


def test_google_api_from_env_builds_sheets(monkeypatch):
    from aruaru.google import GoogleAPI

    monkeypatch.setattr("aruaru.google.google.service_account_credentials", lambda: object())
    monkeypatch.setattr("aruaru.google.google.sheets_service", lambda _c: "sheets")

    g = GoogleAPI.from_env()
    assert g.sheets.service == "sheets"
