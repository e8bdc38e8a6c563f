"""
sessionkit
Client-side session handling for Supabase Auth and Gemini text generation
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
