from .shortlist import ShortlistRegistry

__all__ = ["ShortlistRegistry"]
