"""
Configuration for graph construction.

``GraphConfig`` selects the backing used by the ``empty()`` factory and
controls whether backings run their representation-invariant self-check
after every mutation.
"""

from .exceptions import ConfigurationError

ADJACENCY = "adjacency"
EDGE_LIST = "edge_list"
BACKING_NAMES = (ADJACENCY, EDGE_LIST)


class GraphConfig:
    """
    Configuration for graph backings.

    Attributes:
        backing: Name of the representation built by ``empty()``,
            either ``"adjacency"`` or ``"edge_list"``
        check_invariants: Whether to validate the representation after each
            mutation. Defaults to the interpreter's ``__debug__`` flag, so the
            check is skipped under ``python -O``.
    """

    def __init__(
        self,
        backing: str = ADJACENCY,
        check_invariants: bool = __debug__,
    ):
        if backing not in BACKING_NAMES:
            raise ConfigurationError(
                f"Unknown graph backing {backing!r}; expected one of {', '.join(BACKING_NAMES)}"
            )
        self.backing = backing
        self.check_invariants = check_invariants

    def __repr__(self) -> str:
        return f"GraphConfig(backing={self.backing!r}, check_invariants={self.check_invariants!r})"
