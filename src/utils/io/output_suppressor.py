"""Redirection of stdout/stderr around noisy third-party calls."""

import contextlib
import io
from typing import Iterator, Optional, Tuple

Streams = Tuple[Optional[io.StringIO], Optional[io.StringIO]]


# pylint: disable=too-few-public-methods
class OutputSuppressor:
    """Silences stdout/stderr and, when asked, hands back what was written."""

    @staticmethod
    @contextlib.contextmanager
    def suppress(capture: bool = False) -> Iterator[Streams]:
        """Redirect both streams for the duration of the ``with`` block.

        With ``capture=True`` the buffers are yielded and rewound on exit so the
        caller can read them from the start; otherwise ``(None, None)`` is yielded.
        """
        buf_out, buf_err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(buf_out), contextlib.redirect_stderr(buf_err):
            if capture:
                yield buf_out, buf_err
            else:
                yield None, None
        buf_out.seek(0)
        buf_err.seek(0)
