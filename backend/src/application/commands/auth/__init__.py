"""Auth commands."""

from .register_user import RegisterUserCommand, RegisterUserHandler, RegisterUserResult
from .login_user import LoginUserCommand, LoginUserHandler, LoginResult

__all__ = [
    "RegisterUserCommand",
    "RegisterUserHandler",
    "RegisterUserResult",
    "LoginUserCommand",
    "LoginUserHandler",
    "LoginResult",
]
