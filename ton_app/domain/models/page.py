# Standard library imports
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """
    One page of a cursor-paginated scan.

    next_cursor is an opaque token: pass it back unchanged to resume the
    scan. It is None when no further pages exist.
    """
    items: List[T] = field(default_factory=list)
    next_cursor: Optional[str] = None
