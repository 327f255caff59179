from fastapi import status

INVALID_INDEX_MESSAGE = "Invalid index. Please enter a valid index number."
DATASET_ERROR_MESSAGE = "Error loading JSON data"

class BaseAppException(Exception):
    """Base exception for application"""
    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class DatasetReadError(BaseAppException):
    """Raised when the dataset file cannot be read"""
    def __init__(self, message: str = DATASET_ERROR_MESSAGE):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

class DatasetParseError(BaseAppException):
    """Raised when the dataset file is not a well-formed movie array"""
    def __init__(self, message: str = DATASET_ERROR_MESSAGE):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

class InvalidArgumentException(BaseAppException):
    """Raised when a lookup argument is not a number"""
    def __init__(self, message: str = INVALID_INDEX_MESSAGE):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class OutOfRangeException(BaseAppException):
    """Raised when an index falls outside the dataset"""
    def __init__(self, message: str = INVALID_INDEX_MESSAGE):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class MovieNotFoundException(BaseAppException):
    """Raised when no movie has the requested ID"""
    def __init__(self, message: str = "Cannot find movie with the given ID."):
        super().__init__(message, status.HTTP_404_NOT_FOUND)

class TitleNotFoundException(BaseAppException):
    """Raised when no movie title matches a search"""
    def __init__(self, message: str = "No movies found with that title."):
        super().__init__(message, status.HTTP_404_NOT_FOUND)
