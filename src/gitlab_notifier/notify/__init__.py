from .formatters import PIPELINE_STATUS_DISPLAY, format_merge_request, format_pipeline
from .handlers import dispatch, handle_merge_request, handle_pipeline

__all__ = [
    "PIPELINE_STATUS_DISPLAY",
    "format_merge_request",
    "format_pipeline",
    "dispatch",
    "handle_merge_request",
    "handle_pipeline",
]
