"""
Task Lists Backend
Shared task lists with collaborators and completion progress
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
