"""HTTP status constants for outcome classification."""

# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 300
HTTP_STATUS_UNAUTHORIZED = 401
HTTP_STATUS_FORBIDDEN = 403
HTTP_STATUS_SERVER_ERROR_MIN = 500
HTTP_STATUS_SERVER_ERROR_MAX = 599

AUTH_ERROR_STATUS_CODES = frozenset({HTTP_STATUS_UNAUTHORIZED, HTTP_STATUS_FORBIDDEN})

# Metrics key used for successful outcomes
SUCCESS_METRIC_KEY = "SUCCESS"
