"""Tests for logging setup."""

import logging

import pytest

from gce_uefi.log import setup_logging


def test_setup_logging_configures_package_logger():
    setup_logging(logging.DEBUG)
    pkg_logger = logging.getLogger("gce_uefi")
    try:
        assert pkg_logger.level == logging.DEBUG
        assert len(pkg_logger.handlers) == 1
        assert pkg_logger.propagate is False
        assert logging.getLogger("urllib3").level == logging.WARNING
    finally:
        pkg_logger.handlers = []
        pkg_logger.propagate = True
        pkg_logger.setLevel(logging.NOTSET)


def test_setup_logging_is_idempotent():
    setup_logging()
    setup_logging()
    pkg_logger = logging.getLogger("gce_uefi")
    try:
        assert len(pkg_logger.handlers) == 1
    finally:
        pkg_logger.handlers = []
        pkg_logger.propagate = True
        pkg_logger.setLevel(logging.NOTSET)


def test_failed_lookup_is_logged(caplog):
    from gce_uefi.compute import InMemoryComputeService
    from gce_uefi.errors import ImageRetrievalFailed
    from gce_uefi.models import DiskSpec, ProvisioningSpec
    from gce_uefi.uefi import is_uefi_compatible

    spec = ProvisioningSpec(projectId="p", disks=[DiskSpec(boot=True, image="missing")])
    with caplog.at_level(logging.WARNING, logger="gce_uefi"):
        with pytest.raises(ImageRetrievalFailed):
            is_uefi_compatible(InMemoryComputeService(), spec)
    assert "Image lookup failed for p/missing" in caplog.text
