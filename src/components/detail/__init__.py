"""
Detail component - Single content item resolution by slug.
"""

from .component import run_resolve
from .models import DetailOutput, NotFound, ResolveInput

__all__ = [
    # Entry points
    "run_resolve",
    # Models
    "ResolveInput",
    "DetailOutput",
    "NotFound",
]
