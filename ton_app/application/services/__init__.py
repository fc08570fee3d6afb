from .credential_service import CredentialService, SignupResult, LoginResult

__all__ = ["CredentialService", "SignupResult", "LoginResult"]
