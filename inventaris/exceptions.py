
class InventarisError(Exception):
    """Base class for inventaris errors that are not form validation errors."""
    pass


class StorageFailure(InventarisError):
    """Raised when the blob store cannot save or delete an inventaris image."""
    def __init__(self, message="The image storage is unavailable.", original_exception=None):
        super().__init__(message)
        self.original_exception = original_exception
