"""Logging filters that split records between stdout and stderr."""

import logging


class StreamRoutingFilter(logging.Filter):
    """Pass only the records destined for one stream.

    Parameters
    ----------
    stream : str
        Either ``stdout`` or ``stderr``. Records without a ``stream`` extra
        are routed to stderr.
    """

    def __init__(self, stream: str) -> None:
        super().__init__()
        self.stream = stream

    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "stream", None) or "stderr"
        return target == self.stream
