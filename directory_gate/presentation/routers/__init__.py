"""External-facing routers.

The delegated-login callback path is dictated by the redirect URI
registered with Zoho, so it lives beside the system endpoints rather than
with the resource routers.
"""

from directory_gate.presentation.routers.auth_callbacks import auth_router
from directory_gate.presentation.routers.system import system_router

__all__ = ["auth_router", "system_router"]
