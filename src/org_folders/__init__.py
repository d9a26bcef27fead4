"""org-folders - list an organization's folders, in full or in pages."""

__version__ = "0.1.0"
