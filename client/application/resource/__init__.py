from __future__ import annotations

from application.resource.async_resource import AsyncResource, ResourceStatus

__all__ = ["AsyncResource", "ResourceStatus"]
