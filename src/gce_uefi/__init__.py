"""GCE UEFI check.

Decide whether the boot image of a Compute Engine provisioning spec
supports UEFI boot.
"""

from importlib.metadata import PackageNotFoundError, version

from gce_uefi.compute import ComputeClient, ComputeService, InMemoryComputeService
from gce_uefi.models import DiskSpec, Image, ImageFamilyView, ProvisioningSpec
from gce_uefi.uefi import find_boot_disk, is_uefi_compatible, resolve_boot_image

try:
    __version__ = version("gce-uefi-check")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "ComputeClient",
    "ComputeService",
    "DiskSpec",
    "Image",
    "ImageFamilyView",
    "InMemoryComputeService",
    "ProvisioningSpec",
    "find_boot_disk",
    "is_uefi_compatible",
    "resolve_boot_image",
]
