"""
Exceptions raised by the zapping engine.

Per-node errors are recovered inside clean_forest() and turned into failure
records on the CleanReport. They only surface to callers of the single-node
clean() function.
"""

from typing import Optional


class ZapError(Exception):
    """Base class for all block zapper errors."""


class MalformedNodeError(ZapError):
    """A node has no kind identifier or a structurally invalid shape."""

    def __init__(self, message: str, client_id: Optional[str] = None):
        super().__init__(message)
        self.client_id = client_id


class ReconstructionError(ZapError):
    """
    The node factory refused to build the cleaned node.

    Carries the removed keys computed before the failure so they can still be
    reported as a best-effort record.
    """

    def __init__(
        self,
        message: str,
        kind: str,
        removed_keys: Optional[list] = None,
        client_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.removed_keys = list(removed_keys or [])
        self.client_id = client_id
