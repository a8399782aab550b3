from __future__ import annotations

"""
Application layer: client-side state that mirrors remote data.

Resources, the membership state machine and the screen view models live here;
they talk to remote collaborators through ``application.ports`` only.
"""
