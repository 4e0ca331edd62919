from schoolvote.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
