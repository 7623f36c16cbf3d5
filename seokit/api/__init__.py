"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from seokit.api import app

    uvicorn seokit.api:app --reload
"""

from seokit.api.app import app

__all__ = ["app"]
