"""Domain manager CLI commands."""

from ._create_domain import create_domain
from ._delete_domain import delete_domain
from ._hook import hook
from ._info import info
from ._outputs import outputs
from ._remove_mappings import remove_mappings
from ._setup_mappings import setup_mappings

__all__ = [
    "create_domain",
    "delete_domain",
    "hook",
    "info",
    "outputs",
    "remove_mappings",
    "setup_mappings",
]
