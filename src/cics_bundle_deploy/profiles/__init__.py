"""Profile stores: lookup de perfis de servidor por id."""

from .store import ProfileStore, passthrough_decrypt

__all__ = ["ProfileStore", "passthrough_decrypt"]
