"""Error kinds raised by the files core.

Each class carries the HTTP status and message it renders as; the exception
handler in ``files_manager.main`` is the only place that turns them into
responses.
"""


class FilesError(Exception):
    """Base exception for all files-core errors."""

    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class UnauthorizedError(FilesError):
    """Raised when no token is presented or it resolves to no user."""
    status_code = 401
    message = "Unauthorized"


class MissingNameError(FilesError):
    message = "Missing name"


class MissingTypeError(FilesError):
    """Raised when type is absent or not folder/file/image."""
    message = "Missing type"


class MissingDataError(FilesError):
    message = "Missing data"


class InvalidDataError(FilesError):
    """Raised when upload data is not decodable base64."""
    message = "Invalid data"


class ParentNotFoundError(FilesError):
    message = "Parent not found"


class ParentNotAFolderError(FilesError):
    message = "Parent is not a folder"


class NotFoundError(FilesError):
    """Raised for absent records, records owned by someone else and
    records whose blob is gone. The three cases are deliberately the same."""
    status_code = 404
    message = "Not found"


class NoContentForFolderError(FilesError):
    message = "A folder doesn't have content"


class StorageWriteError(FilesError):
    """Raised when blob bytes cannot be written; message is the OS error."""
