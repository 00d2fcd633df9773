"""Receipt package: line formatting and output sinks."""
from .formatter import DEFAULT_LINE_FORMAT, LineFormatter, validate_template
from .sinks import ListSink, ReceiptSink, StreamSink

__all__ = [
    "DEFAULT_LINE_FORMAT",
    "LineFormatter",
    "validate_template",
    "ListSink",
    "ReceiptSink",
    "StreamSink",
]
