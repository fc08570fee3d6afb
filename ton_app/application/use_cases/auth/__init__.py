from .get_current_user import AuthenticateTokenUseCase, GetCurrentUserUseCase

__all__ = ["AuthenticateTokenUseCase", "GetCurrentUserUseCase"]
