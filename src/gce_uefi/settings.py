"""Compute client settings loaded from environment variables."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

DEFAULT_API_ENDPOINT = "https://compute.googleapis.com/compute/v1"


class ComputeSettings(BaseSettings):
    """Configuration for the Compute Engine REST client.

    Values are read from ``GCE_``-prefixed environment variables
    (case-insensitive) and optionally from a ``.env`` file in the working
    directory, e.g. ``GCE_API_ENDPOINT`` or ``GCE_REQUEST_TIMEOUT``.
    """

    api_endpoint: str = DEFAULT_API_ENDPOINT
    request_timeout: int = 30
    auth_scopes: list[str] = Field(
        default_factory=lambda: ["https://www.googleapis.com/auth/compute.readonly"]
    )

    model_config = {
        "env_prefix": "GCE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def _validate_endpoint(self) -> "ComputeSettings":
        if not self.api_endpoint.startswith("https://"):
            raise ValueError(
                f"GCE_API_ENDPOINT must be an https:// URL, got {self.api_endpoint!r}"
            )
        if self.request_timeout <= 0:
            raise ValueError("GCE_REQUEST_TIMEOUT must be a positive number of seconds")
        return self
