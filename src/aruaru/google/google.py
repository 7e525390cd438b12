from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build

from aruaru import config
from aruaru import logger as logger_mod

from ._retry import RetryConfig
from .sheets import SheetsFacade

log = logger_mod.get_logger()

SHEETS_SCOPES = ("https://www.googleapis.com/auth/spreadsheets",)


def service_account_credentials(scopes: tuple[str, ...] = SHEETS_SCOPES):
    """Service-account credentials for the attempt-log spreadsheet.

    GOOGLE_CREDENTIALS_JSON (the key itself) is used when set, otherwise the
    key file at GOOGLE_CREDENTIALS_FILE. A malformed inline key raises
    ValueError instead of falling back to the file.
    """

    inline = os.getenv(config.GOOGLE_CREDENTIALS_JSON_ENV)
    if inline:
        try:
            info = json.loads(inline)
        except json.JSONDecodeError as e:
            raise ValueError(f"{config.GOOGLE_CREDENTIALS_JSON_ENV} is not valid JSON") from e
        if not isinstance(info, dict):
            raise ValueError(f"{config.GOOGLE_CREDENTIALS_JSON_ENV} must be a JSON object")
        log.debug(f"Using service account from {config.GOOGLE_CREDENTIALS_JSON_ENV}")
        return service_account.Credentials.from_service_account_info(info, scopes=list(scopes))

    log.debug(f"Using service account key file {config.GOOGLE_CREDENTIALS_FILE}")
    return service_account.Credentials.from_service_account_file(
        config.GOOGLE_CREDENTIALS_FILE, scopes=list(scopes)
    )


def sheets_service(creds) -> Any:
    return build("sheets", "v4", credentials=creds, cache_discovery=False)


@dataclass
class GoogleAPI:
    """Single entry point for the Google APIs this package talks to."""

    sheets: SheetsFacade

    @classmethod
    def from_env(cls, *, retry: RetryConfig | None = None) -> "GoogleAPI":
        creds = service_account_credentials()
        return cls(sheets=SheetsFacade(sheets_service(creds), retry=retry))
