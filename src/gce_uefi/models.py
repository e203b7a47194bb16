"""Pydantic models for provisioning specs and Compute Engine image descriptors.

Field names follow the camelCase used by the Compute Engine API so that
API payloads and machine provider specs validate without aliasing.
"""

from pydantic import BaseModel, Field

UEFI_COMPATIBLE = "UEFI_COMPATIBLE"

# ---------------------------------------------------------------------------
# Provisioning spec
# ---------------------------------------------------------------------------


class DiskSpec(BaseModel):
    """One disk attached to the instance."""

    boot: bool = False
    image: str = ""  # simple name, resource path, family path or URL


class ProvisioningSpec(BaseModel):
    """The subset of a machine provider spec needed to pick the boot image.

    If several disks are flagged ``boot`` the first one in ``disks`` wins.
    """

    disks: list[DiskSpec] = Field(default_factory=list)
    projectId: str = ""
    zone: str = ""


# ---------------------------------------------------------------------------
# Compute Engine descriptors
# ---------------------------------------------------------------------------


class GuestOsFeature(BaseModel):
    type: str


class Image(BaseModel):
    """Subset of the ``compute#image`` resource."""

    name: str = ""
    family: str | None = None
    selfLink: str | None = None
    architecture: str | None = None
    status: str | None = None
    guestOsFeatures: list[GuestOsFeature] = Field(default_factory=list)

    @property
    def uefi_compatible(self) -> bool:
        return any(f.type == UEFI_COMPATIBLE for f in self.guestOsFeatures)


class ImageFamilyView(BaseModel):
    """Subset of the ``compute#imageFamilyView`` resource.

    The view points at the latest non-deprecated image of the family that is
    available in the requested zone.
    """

    image: Image | None = None

    @property
    def uefi_compatible(self) -> bool:
        return self.image is not None and self.image.uefi_compatible
