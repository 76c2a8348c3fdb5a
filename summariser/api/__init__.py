"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from summariser.api import app

    uvicorn summariser.api:app --reload
"""

from summariser.api.app import app

__all__ = ["app"]
