from fedid.application.services.auth_result import AuthResult
from fedid.application.services.login_service import LoginService, resolve_activity_id
from fedid.application.services.registration_service import RegistrationService

__all__ = [
    "AuthResult",
    "LoginService",
    "RegistrationService",
    "resolve_activity_id",
]
