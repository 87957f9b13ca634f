"""Container module - centralized dependency injection.

- infrastructure: app-scoped singletons (settings-driven) and the
  request-scoped database session
- auth_handlers: request-scoped handler factories for FastAPI Depends

    from credential_service.core.container import get_logger, get_register_user_handler
"""

from credential_service.core.container.auth_handlers import (
    get_confirm_password_reset_handler,
    get_login_user_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_send_verification_email_handler,
    get_verify_email_handler,
)
from credential_service.core.container.infrastructure import (
    clear_singletons,
    get_database,
    get_db_session,
    get_email_service,
    get_email_verification_token_service,
    get_logger,
    get_password_reset_token_service,
    get_password_service,
    get_token_service,
)

__all__ = [
    # Infrastructure
    "clear_singletons",
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_email_verification_token_service",
    "get_logger",
    "get_password_reset_token_service",
    "get_password_service",
    "get_token_service",
    # Handlers
    "get_confirm_password_reset_handler",
    "get_login_user_handler",
    "get_register_user_handler",
    "get_request_password_reset_handler",
    "get_send_verification_email_handler",
    "get_verify_email_handler",
]
