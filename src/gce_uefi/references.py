"""Classification of boot disk image references.

Compute Engine accepts an image for a boot disk in several shapes::

    uefi-image                                                   (simple name)
    projects/P/global/images/I                                   (resource path)
    projects/P/global/images/family/F                            (image family)
    https://www.googleapis.com/compute/v1/projects/P/global/images/I  (URL)

:func:`parse_image_reference` decides which one applies and returns a
frozen record carrying exactly the identifiers the lookup needs.  Parsing is
purely syntactic: the string is split on ``/`` and keyword segments must
match literally (case-sensitive, no trimming).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gce_uefi.errors import (
    MissingProjectsSegment,
    UnexpectedImagePathFormat,
    UnrecognizedImagePathFormat,
)

logger = logging.getLogger(__name__)

FQDN_PREFIXES = (
    "https://www.googleapis.com/compute/",
    "https://compute.googleapis.com/compute/",
)
_PROJECTS = "projects/"
# {project}/global/images/{image}
_MIN_FQDN_SEGMENTS = 4


@dataclass(frozen=True)
class StandardImage:
    project: str
    image: str


@dataclass(frozen=True)
class SimpleImage:
    """A bare image name; the project comes from the provisioning spec."""

    project: str
    image: str


@dataclass(frozen=True)
class ImageFamily:
    """An image family; the zone comes from the provisioning spec."""

    project: str
    family: str
    zone: str


@dataclass(frozen=True)
class FQDNImage:
    project: str
    image: str


ImageReference = StandardImage | SimpleImage | ImageFamily | FQDNImage


def _is_global_image(parts: list[str]) -> bool:
    """Match ``[project, "global", "images", image]``."""
    return (
        len(parts) == 4
        and all(parts)
        and parts[1] == "global"
        and parts[2] == "images"
    )


def _is_global_family(parts: list[str]) -> bool:
    """Match ``[project, "global", "images", "family", family]``."""
    return (
        len(parts) == 5
        and all(parts)
        and parts[1] == "global"
        and parts[2] == "images"
        and parts[3] == "family"
    )


def _parse_fqdn(image: str) -> FQDNImage:
    segments = image.split("/")
    if "projects" not in segments:
        raise MissingProjectsSegment(image)
    parts = segments[segments.index("projects") + 1 :]
    if len(parts) < _MIN_FQDN_SEGMENTS:
        raise UnexpectedImagePathFormat(image)
    if not _is_global_image(parts):
        raise UnrecognizedImagePathFormat(image)
    return FQDNImage(project=parts[0], image=parts[3])


def _parse_resource_path(image: str, zone: str) -> StandardImage | ImageFamily:
    parts = image[len(_PROJECTS) :].split("/")
    if _is_global_image(parts):
        return StandardImage(project=parts[0], image=parts[3])
    if _is_global_family(parts):
        return ImageFamily(project=parts[0], family=parts[4], zone=zone)
    raise UnrecognizedImagePathFormat(image)


def parse_image_reference(image: str, project_id: str, zone: str) -> ImageReference:
    """Classify *image* into exactly one reference shape.

    *project_id* is used for simple names and *zone* for image families;
    neither is ever read from the reference string itself.

    Raises a subclass of :class:`~gce_uefi.errors.ImageReferenceError` when
    the string matches no known shape.
    """
    if image.startswith(FQDN_PREFIXES):
        ref: ImageReference = _parse_fqdn(image)
    elif image.startswith(_PROJECTS):
        ref = _parse_resource_path(image, zone)
    elif image and "/" not in image:
        ref = SimpleImage(project=project_id, image=image)
    else:
        raise UnrecognizedImagePathFormat(image)

    logger.debug("Image reference %r classified as %r", image, ref)
    return ref
