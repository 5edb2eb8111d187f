from .base import ApplicationError, ErrorCode, ErrorDetails, ErrorLevel
from .config import Settings, settings
from .errors import MalformedQueryError, QueryErrorDetails
