from .__http import INTERNAL_SERVER_ERROR, server_error_handler

__all__ = ["INTERNAL_SERVER_ERROR", "server_error_handler"]
