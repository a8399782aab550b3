from __future__ import annotations

"""
Infrastructure layer (adapters only).

Concrete implementations of the application ports: HTTP clients for the
watchlist, auth and metadata services, local fakes, configuration and logging
helpers. Application code depends on the ports, never on this package.
"""

__all__: list[str] = []
