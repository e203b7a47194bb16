"""Exceptions raised while checking a boot image for UEFI support.

Every message carries a stable lower-case phrase (e.g. ``"no boot disk
found"``) so callers and tests can match on the cause without depending on
the rest of the wording.
"""

from __future__ import annotations


class UEFICheckError(Exception):
    """Base class for all UEFI check failures."""


class NoBootDiskFound(UEFICheckError):
    def __init__(self) -> None:
        super().__init__("no boot disk found in provisioning spec")


# ---------------------------------------------------------------------------
# Image reference parsing
# ---------------------------------------------------------------------------


class ImageReferenceError(UEFICheckError, ValueError):
    """The boot disk image string could not be classified."""

    def __init__(self, message: str, image: str) -> None:
        super().__init__(message)
        self.image = image


class MissingProjectsSegment(ImageReferenceError):
    def __init__(self, image: str) -> None:
        super().__init__(
            f"image URL {image!r} does not contain expected 'projects/' segment", image
        )


class UnexpectedImagePathFormat(ImageReferenceError):
    def __init__(self, image: str) -> None:
        super().__init__(f"unexpected image path format: {image!r}", image)


class UnrecognizedImagePathFormat(ImageReferenceError):
    def __init__(self, image: str) -> None:
        super().__init__(f"unrecognized image path format: {image!r}", image)


# ---------------------------------------------------------------------------
# Backend lookups
# ---------------------------------------------------------------------------


class ImageRetrievalFailed(UEFICheckError):
    """The compute backend could not return the image descriptor."""

    def __init__(self, project: str, image: str, cause: BaseException) -> None:
        super().__init__(f"unable to retrieve image {image!r} in project {project!r}: {cause}")
        self.project = project
        self.image = image


class ImageFamilyRetrievalFailed(UEFICheckError):
    """The compute backend could not return the image family view."""

    def __init__(self, project: str, zone: str, family: str, cause: BaseException) -> None:
        super().__init__(
            f"unable to retrieve image family {family!r} in project {project!r} "
            f"(zone {zone!r}): {cause}"
        )
        self.project = project
        self.zone = zone
        self.family = family


class ResourceNotFound(LookupError):
    """Raised by a compute service when the requested resource does not exist."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"resource not found: {resource}")
        self.resource = resource
