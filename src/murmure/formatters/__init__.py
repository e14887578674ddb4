"""Display formatters for webhook history."""

from murmure.formatters.history import format_relative_time, format_response_body, mask_token

__all__ = ["format_relative_time", "format_response_body", "mask_token"]
