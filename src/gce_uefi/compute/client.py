"""Compute Engine v1 REST client for image and image-family lookups."""

from __future__ import annotations

import logging

import requests

from gce_uefi.compute._auth import _get_headers
from gce_uefi.errors import ResourceNotFound
from gce_uefi.models import Image, ImageFamilyView
from gce_uefi.settings import ComputeSettings

logger = logging.getLogger(__name__)


class ComputeClient:
    """:class:`~gce_uefi.compute.service.ComputeService` backed by the REST API.

    Every call is a single ``GET`` with no retry and no caching.  A 404 is
    raised as :class:`~gce_uefi.errors.ResourceNotFound`; any other error
    status surfaces as :class:`requests.HTTPError`.
    """

    def __init__(self, settings: ComputeSettings | None = None) -> None:
        self._settings = settings or ComputeSettings()

    @property
    def endpoint(self) -> str:
        return self._settings.api_endpoint.rstrip("/")

    def _get(self, path: str) -> dict:
        url = f"{self.endpoint}/{path}"
        logger.info("GET %s", url)
        resp = requests.get(
            url,
            headers=_get_headers(self._settings.auth_scopes),
            timeout=self._settings.request_timeout,
        )
        if resp.status_code == 404:
            raise ResourceNotFound(path)
        resp.raise_for_status()
        data: dict = resp.json()
        return data

    def get_image(self, project: str, image: str) -> Image:
        """Return the ``compute#image`` resource *image* in *project*."""
        data = self._get(f"projects/{project}/global/images/{image}")
        return Image.model_validate(data)

    def get_image_family(self, project: str, zone: str, family: str) -> ImageFamilyView:
        """Return the zonal view of image *family* in *project*.

        The view resolves the family to its latest image available in *zone*.
        """
        data = self._get(f"projects/{project}/zones/{zone}/imageFamilyViews/{family}")
        return ImageFamilyView.model_validate(data)
