"""Authentication helpers for Compute Engine API calls."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import google.auth
import google.auth.transport.requests

if TYPE_CHECKING:
    from google.auth.credentials import Credentials

logger = logging.getLogger(__name__)

COMPUTE_READONLY_SCOPE = "https://www.googleapis.com/auth/compute.readonly"

# Keyed by the requested scopes
_credentials: dict[tuple[str, ...], Credentials] = {}


def get_credentials(scopes: list[str] | None = None) -> Credentials:
    """Return Application Default Credentials for *scopes*, loading them on first use."""
    key = tuple(scopes or [COMPUTE_READONLY_SCOPE])
    creds = _credentials.get(key)
    if creds is None:
        creds, project = google.auth.default(scopes=list(key))
        logger.debug(
            "Loaded application default credentials (project=%s, scopes=%s)", project, key
        )
        _credentials[key] = creds
    return creds


def _get_headers(scopes: list[str] | None = None) -> dict[str, str]:
    """Return authorization headers, refreshing the token when it has expired."""
    creds = get_credentials(scopes)
    if not creds.valid:
        creds.refresh(google.auth.transport.requests.Request())
    return {
        "Authorization": f"Bearer {creds.token}",
        "Content-Type": "application/json",
    }
