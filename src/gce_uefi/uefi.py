"""UEFI compatibility check for the boot disk of a provisioning spec.

The check is a linear pipeline with no retries and no caching::

    find_boot_disk -> parse_image_reference -> compute lookup -> uefi_compatible

Any failure raises immediately; a result is only returned when every stage
succeeded.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from gce_uefi.compute.service import ComputeService
from gce_uefi.errors import ImageFamilyRetrievalFailed, ImageRetrievalFailed, NoBootDiskFound
from gce_uefi.models import DiskSpec, ProvisioningSpec
from gce_uefi.references import ImageFamily, ImageReference, parse_image_reference

logger = logging.getLogger(__name__)


def find_boot_disk(disks: Sequence[DiskSpec]) -> DiskSpec:
    """Return the first disk flagged ``boot``.

    Raises :class:`~gce_uefi.errors.NoBootDiskFound` when there is none.
    """
    for index, disk in enumerate(disks):
        if disk.boot:
            logger.debug("Boot disk is disk #%d (image=%r)", index, disk.image)
            return disk
    raise NoBootDiskFound()


def resolve_boot_image(spec: ProvisioningSpec) -> ImageReference:
    """Return the parsed image reference of the boot disk of *spec*."""
    disk = find_boot_disk(spec.disks)
    return parse_image_reference(disk.image, spec.projectId, spec.zone)


def is_uefi_compatible(compute: ComputeService, spec: ProvisioningSpec) -> bool:
    """Return whether the boot disk image of *spec* supports UEFI boot.

    Image references (simple name, resource path, URL) are looked up with
    ``compute.get_image``; family references with
    ``compute.get_image_family`` using the spec's zone.  Backend errors are
    re-raised as :class:`~gce_uefi.errors.ImageRetrievalFailed` or
    :class:`~gce_uefi.errors.ImageFamilyRetrievalFailed`.
    """
    ref = resolve_boot_image(spec)

    if isinstance(ref, ImageFamily):
        try:
            view = compute.get_image_family(ref.project, ref.zone, ref.family)
        except Exception as exc:
            logger.warning(
                "Image family lookup failed for %s/%s in %s: %s",
                ref.project,
                ref.family,
                ref.zone,
                exc,
            )
            raise ImageFamilyRetrievalFailed(ref.project, ref.zone, ref.family, exc) from exc
        return view.uefi_compatible

    try:
        image = compute.get_image(ref.project, ref.image)
    except Exception as exc:
        logger.warning("Image lookup failed for %s/%s: %s", ref.project, ref.image, exc)
        raise ImageRetrievalFailed(ref.project, ref.image, exc) from exc
    return image.uefi_compatible
