from .token_manager import Credentials, TokenManager
from .token_state import TOKEN_BUFFER_SECONDS, TokenState

__all__ = [
    "Credentials",
    "TokenManager",
    "TokenState",
    "TOKEN_BUFFER_SECONDS",
]
