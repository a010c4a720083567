from shorturl.middleware.logging import RequestLoggingMiddleware, add_logging_middleware, request_id_var

__all__ = ["RequestLoggingMiddleware", "add_logging_middleware", "request_id_var"]
