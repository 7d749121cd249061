"""Logging formatters for stream routing."""

import logging


class StreamFormatter(logging.Formatter):
    """Logging formatter that prefixes diagnostics with their level.

    Records tagged with ``extra={"stream": "stdout"}`` are report output and
    are emitted verbatim. Everything else is a diagnostic line on stderr and
    gets a level prefix for warnings and errors.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record, adding a level prefix to stderr diagnostics.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to format

        Returns
        -------
        str
            Formatted log message
        """
        msg = super().format(record)

        if getattr(record, "stream", None) == "stdout":
            return msg

        if record.levelno >= logging.WARNING:
            return f"[{record.levelname.lower()}] {msg}"

        return msg
