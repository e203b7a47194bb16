"""In-memory compute service for tests and offline use."""

from __future__ import annotations

from dataclasses import dataclass, field

from gce_uefi.errors import ResourceNotFound
from gce_uefi.models import Image, ImageFamilyView


@dataclass
class InMemoryComputeService:
    """Serve images and image family views from plain dicts.

    ``images`` is keyed by ``(project, image)`` and ``families`` by
    ``(project, zone, family)``.  Unknown keys raise
    :class:`~gce_uefi.errors.ResourceNotFound`.  Every call is recorded in
    ``calls`` so tests can assert on which lookup ran.
    """

    images: dict[tuple[str, str], Image] = field(default_factory=dict)
    families: dict[tuple[str, str, str], ImageFamilyView] = field(default_factory=dict)
    calls: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)

    def add_image(self, project: str, image: Image) -> None:
        self.images[(project, image.name)] = image

    def add_family(self, project: str, zone: str, family: str, image: Image) -> None:
        self.families[(project, zone, family)] = ImageFamilyView(image=image)

    def get_image(self, project: str, image: str) -> Image:
        self.calls.append(("get_image", (project, image)))
        try:
            return self.images[(project, image)]
        except KeyError:
            raise ResourceNotFound(f"projects/{project}/global/images/{image}") from None

    def get_image_family(self, project: str, zone: str, family: str) -> ImageFamilyView:
        self.calls.append(("get_image_family", (project, zone, family)))
        try:
            return self.families[(project, zone, family)]
        except KeyError:
            raise ResourceNotFound(
                f"projects/{project}/zones/{zone}/imageFamilyViews/{family}"
            ) from None
