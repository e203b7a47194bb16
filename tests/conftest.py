"""Shared test fixtures for gce-uefi-check tests."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from gce_uefi.compute import InMemoryComputeService
from gce_uefi.models import GuestOsFeature, Image

ZONE = "us-central1-a"


def make_image(name: str, uefi: bool) -> Image:
    features = [GuestOsFeature(type="VIRTIO_SCSI_MULTIQUEUE")]
    if uefi:
        features.append(GuestOsFeature(type="UEFI_COMPATIBLE"))
    return Image(name=name, guestOsFeatures=features)


@pytest.fixture(autouse=True)
def _mock_credentials():
    """Prevent real Google credential lookups in every test."""
    creds = MagicMock()
    creds.valid = True
    creds.token = "fake-token"
    with patch("gce_uefi.compute._auth.get_credentials", return_value=creds):
        yield creds


@pytest.fixture()
def compute() -> InMemoryComputeService:
    """An in-memory backend with UEFI and non-UEFI images and families.

    Nothing is registered for project ``errImageNotFound`` so every lookup
    there fails.
    """
    svc = InMemoryComputeService()
    for project in ("fooproject", "simple-project"):
        svc.add_image(project, make_image("uefi-image", uefi=True))
        svc.add_image(project, make_image("fooimage", uefi=False))
        svc.add_image(project, make_image("non-uefi", uefi=False))
        svc.add_image(project, make_image("non-uefi-simple", uefi=False))
        svc.add_family(project, ZONE, "uefi-image-family", make_image("uefi-v2", uefi=True))
        svc.add_family(project, ZONE, "fooimage", make_image("foo-v7", uefi=False))
    return svc
