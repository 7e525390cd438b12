"""aruaru.google

Thin wrapper around the Google Sheets API used by the attempt log.

    from aruaru.google import GoogleAPI

    g = GoogleAPI.from_env()
    rows = g.sheets.read_values(spreadsheet_id, "aruaru_logs!A2:D")
"""

from .google import GoogleAPI

__all__ = ["GoogleAPI"]
