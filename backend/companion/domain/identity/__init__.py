"""User directory and profile creation."""

from .directory import UserDirectory
from .models import Profile, normalize_identifier
from .service import create_profile

__all__ = [
	"Profile",
	"UserDirectory",
	"create_profile",
	"normalize_identifier",
]
