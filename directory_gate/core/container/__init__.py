"""Container module - centralized dependency injection.

Re-exports all factory functions from submodules:

    from directory_gate.core.container import get_logger, get_token_service, ...

Organization:
- infrastructure: Database, sessions, token service, state codec, logging
- identity: Zoho configuration, provider adapter, identity token verifier
- repositories: Repository factories
- handlers: Command/query handler factories and the access policy
"""

# Infrastructure services
from directory_gate.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_directory_session,
    get_logger,
    get_state_codec,
    get_token_service,
)

# Identity provider
from directory_gate.core.container.identity import (
    get_id_token_verifier,
    get_identity_provider,
    get_zoho_config,
)

# Repositories
from directory_gate.core.container.repositories import (
    get_call_log_repository,
    get_directory_repository,
    get_personal_request_repository,
    get_user_repository,
    get_version_repository,
)

# Handlers
from directory_gate.core.container.handlers import (
    get_begin_authorization_handler,
    get_complete_authorization_handler,
    get_get_latest_version_handler,
    get_list_pending_requests_handler,
    get_list_visible_contacts_handler,
    get_request_access_policy,
    get_submit_personal_request_handler,
    get_update_request_status_handler,
    get_upload_call_log_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_directory_session",
    "get_logger",
    "get_state_codec",
    "get_token_service",
    # Identity
    "get_id_token_verifier",
    "get_identity_provider",
    "get_zoho_config",
    # Repositories
    "get_call_log_repository",
    "get_directory_repository",
    "get_personal_request_repository",
    "get_user_repository",
    "get_version_repository",
    # Handlers
    "get_begin_authorization_handler",
    "get_complete_authorization_handler",
    "get_get_latest_version_handler",
    "get_list_pending_requests_handler",
    "get_list_visible_contacts_handler",
    "get_request_access_policy",
    "get_submit_personal_request_handler",
    "get_update_request_status_handler",
    "get_upload_call_log_handler",
]
