"""Blog summariser: fetch a page, summarise it, translate the summary to Urdu."""

__version__ = "0.1.0"
