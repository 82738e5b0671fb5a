class ShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortener_error'
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)


class InvalidTargetURLError(ShortenerError):
    """Base exception for rejected target URLs."""

    error_code = 'validation:invalid_target_url'
    message = 'Invalid URL format'


class URLRequiredError(InvalidTargetURLError):
    """Raised when the request carries no target URL."""

    error_code = 'validation:url_required'
    message = 'URL is required'


class InvalidURLFormatError(InvalidTargetURLError):
    """Raised when the target URL is not a valid absolute URL."""

    error_code = 'validation:invalid_url_format'
    message = 'Invalid URL format'


class SlugNotFoundError(ShortenerError):
    """Raised when no mapping exists for a slug."""

    error_code = 'lookup:slug_not_found'
    message = 'Short URL not found'


class SlugAllocationError(ShortenerError):
    """Raised when every slug candidate collided."""

    error_code = 'allocation:slug_exhausted'
    message = 'Failed to generate unique slug'


class InvalidSlugError(ShortenerError):
    """Raised when a custom slug cannot be served as a single path segment."""

    error_code = 'validation:invalid_slug'
    message = 'Invalid slug format'
