"""Protocol for the compute backend consulted by the UEFI check."""

from typing import Protocol, runtime_checkable

from gce_uefi.models import Image, ImageFamilyView


@runtime_checkable
class ComputeService(Protocol):
    """Read-only image metadata lookups.

    Implementations perform a single synchronous attempt per call and raise
    on failure (:class:`~gce_uefi.errors.ResourceNotFound` when the resource
    does not exist).
    """

    def get_image(self, project: str, image: str) -> Image: ...
    def get_image_family(self, project: str, zone: str, family: str) -> ImageFamilyView: ...
