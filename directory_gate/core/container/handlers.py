"""Handler dependency factories.

Request-scoped command/query handlers. Repositories come from the
repository factories (request-scoped); services and the logger are
application-scoped singletons.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends

from directory_gate.core.config import settings
from directory_gate.core.container.identity import (
    get_id_token_verifier,
    get_identity_provider,
)
from directory_gate.core.container.infrastructure import (
    get_logger,
    get_state_codec,
    get_token_service,
)
from directory_gate.core.container.repositories import (
    get_call_log_repository,
    get_directory_repository,
    get_personal_request_repository,
    get_user_repository,
    get_version_repository,
)
from directory_gate.infrastructure.persistence.repositories import (
    CallLogRepository,
    DirectoryRepository,
    PersonalRequestRepository,
    UserRepository,
    VersionRepository,
)

if TYPE_CHECKING:
    from directory_gate.application.commands.handlers.begin_authorization_handler import (
        BeginAuthorizationHandler,
    )
    from directory_gate.application.commands.handlers.complete_authorization_handler import (
        CompleteAuthorizationHandler,
    )
    from directory_gate.application.commands.handlers.submit_personal_request_handler import (
        SubmitPersonalRequestHandler,
    )
    from directory_gate.application.commands.handlers.update_request_status_handler import (
        UpdateRequestStatusHandler,
    )
    from directory_gate.application.commands.handlers.upload_call_log_handler import (
        UploadCallLogHandler,
    )
    from directory_gate.application.queries.handlers.get_latest_version_handler import (
        GetLatestVersionHandler,
    )
    from directory_gate.application.queries.handlers.list_pending_requests_handler import (
        ListPendingRequestsHandler,
    )
    from directory_gate.application.queries.handlers.list_visible_contacts_handler import (
        ListVisibleContactsHandler,
    )
    from directory_gate.application.services.request_access_policy import (
        RequestAccessPolicy,
    )


@lru_cache()
def get_request_access_policy() -> "RequestAccessPolicy":
    """Get the personal request access policy (permissive)."""
    from directory_gate.application.services.request_access_policy import (
        PermissiveRequestAccessPolicy,
    )

    return PermissiveRequestAccessPolicy()


# ============================================================================
# Identity Handlers
# ============================================================================


async def get_begin_authorization_handler() -> "BeginAuthorizationHandler":
    """Get BeginAuthorization handler (no database access)."""
    from directory_gate.application.commands.handlers.begin_authorization_handler import (
        BeginAuthorizationHandler,
    )

    return BeginAuthorizationHandler(
        identity_provider=get_identity_provider(),
        state_codec=get_state_codec(),
        default_return_url=settings.default_frontend_url,
        return_url_allowlist=settings.redirect_allowlist_origins,
    )


async def get_complete_authorization_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> "CompleteAuthorizationHandler":
    """Get CompleteAuthorization handler (request-scoped).

    Dependencies:
    - ZohoIdentityProvider, identity token verifier (app-scoped)
    - UserRepository (request-scoped)
    - JWTService, StateTokenCodec, logger (app-scoped)
    """
    from directory_gate.application.commands.handlers.complete_authorization_handler import (
        CompleteAuthorizationHandler,
    )

    return CompleteAuthorizationHandler(
        identity_provider=get_identity_provider(),
        id_token_verifier=get_id_token_verifier(),
        state_codec=get_state_codec(),
        user_repo=user_repo,
        token_service=get_token_service(),
        logger=get_logger(),
        default_return_url=settings.default_frontend_url,
    )


# ============================================================================
# Personal Request Handlers
# ============================================================================


async def get_submit_personal_request_handler(
    request_repo: PersonalRequestRepository = Depends(
        get_personal_request_repository
    ),
) -> "SubmitPersonalRequestHandler":
    """Get SubmitPersonalRequest handler (request-scoped)."""
    from directory_gate.application.commands.handlers.submit_personal_request_handler import (
        SubmitPersonalRequestHandler,
    )

    return SubmitPersonalRequestHandler(request_repo=request_repo, logger=get_logger())


async def get_update_request_status_handler(
    request_repo: PersonalRequestRepository = Depends(
        get_personal_request_repository
    ),
) -> "UpdateRequestStatusHandler":
    """Get UpdateRequestStatus handler (request-scoped)."""
    from directory_gate.application.commands.handlers.update_request_status_handler import (
        UpdateRequestStatusHandler,
    )

    return UpdateRequestStatusHandler(
        request_repo=request_repo,
        access_policy=get_request_access_policy(),
        logger=get_logger(),
    )


async def get_list_pending_requests_handler(
    request_repo: PersonalRequestRepository = Depends(
        get_personal_request_repository
    ),
) -> "ListPendingRequestsHandler":
    """Get ListPendingRequests handler (request-scoped)."""
    from directory_gate.application.queries.handlers.list_pending_requests_handler import (
        ListPendingRequestsHandler,
    )

    return ListPendingRequestsHandler(
        request_repo=request_repo,
        access_policy=get_request_access_policy(),
        logger=get_logger(),
    )


# ============================================================================
# Directory, Call Log and Version Handlers
# ============================================================================


async def get_list_visible_contacts_handler(
    directory_repo: DirectoryRepository = Depends(get_directory_repository),
    request_repo: PersonalRequestRepository = Depends(
        get_personal_request_repository
    ),
) -> "ListVisibleContactsHandler":
    """Get ListVisibleContacts handler (request-scoped, two sessions)."""
    from directory_gate.application.queries.handlers.list_visible_contacts_handler import (
        ListVisibleContactsHandler,
    )

    return ListVisibleContactsHandler(
        directory_repo=directory_repo,
        request_repo=request_repo,
        logger=get_logger(),
    )


async def get_upload_call_log_handler(
    call_log_repo: CallLogRepository = Depends(get_call_log_repository),
) -> "UploadCallLogHandler":
    """Get UploadCallLog handler (request-scoped)."""
    from directory_gate.application.commands.handlers.upload_call_log_handler import (
        UploadCallLogHandler,
    )

    return UploadCallLogHandler(call_log_repo=call_log_repo, logger=get_logger())


async def get_get_latest_version_handler(
    version_repo: VersionRepository = Depends(get_version_repository),
) -> "GetLatestVersionHandler":
    """Get GetLatestVersion handler (request-scoped)."""
    from directory_gate.application.queries.handlers.get_latest_version_handler import (
        GetLatestVersionHandler,
    )

    return GetLatestVersionHandler(version_repo=version_repo, logger=get_logger())
