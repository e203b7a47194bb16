"""Compute Engine image metadata lookups.

Re-exports the service protocol and its implementations so callers can use
``from gce_uefi.compute import ComputeClient``.
"""

from gce_uefi.compute.client import ComputeClient
from gce_uefi.compute.fake import InMemoryComputeService
from gce_uefi.compute.service import ComputeService

__all__ = ["ComputeClient", "ComputeService", "InMemoryComputeService"]
