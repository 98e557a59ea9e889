# re-export the public API for simpler imports
from .core.config import Settings, settings
from .core.exceptions import EmptyTokenError, HashIDError, InvalidTokenError, TokenVerificationError
from .services.codec import HashID32, get_codec
from .utils.encoding import is_valid
from .utils.shuffle import consistent_shuffle

__all__ = [
    "HashID32",
    "get_codec",
    "is_valid",
    "consistent_shuffle",
    "HashIDError",
    "InvalidTokenError",
    "EmptyTokenError",
    "TokenVerificationError",
    "Settings",
    "settings",
]
