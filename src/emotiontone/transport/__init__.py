"""HTTP transport for the emotion API."""

from .http_client import HttpClient, extract_error_message, parse_retry_after

__all__ = ["HttpClient", "extract_error_message", "parse_retry_after"]
