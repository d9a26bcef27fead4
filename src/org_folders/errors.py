"""Exceptions raised by the folder listing and pagination layers."""


class FolderError(Exception):
    """Base class for org-folders errors."""


class InvalidOrganization(FolderError, ValueError):
    """Raised when a request carries a missing or nil organization id."""

    def __init__(self, org_id=None, reason: str = "cannot be nil"):
        self.org_id = org_id
        super().__init__(f"invalid org ID: {reason}")


class MalformedMarker(FolderError, ValueError):
    """Raised when a page marker cannot be decoded.

    Only the marker codecs raise this. The pagination service absorbs it
    and serves the first page instead.
    """


class FoldersNotFound(FolderError, LookupError):
    """Raised by the non-paginated fetch when an organization has no folders."""

    def __init__(self, org_id):
        self.org_id = org_id
        super().__init__(f"no folders found for organisation ID {org_id}")


class SourceError(FolderError):
    """Raised when a folder data file cannot be read or parsed."""
