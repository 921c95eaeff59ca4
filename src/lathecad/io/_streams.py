"""Path-or-stream handling shared by the writers."""

from __future__ import annotations

from contextlib import contextmanager


@contextmanager
def output_stream(path_or_file, mode: str = 'w', encoding: str = 'utf-8'):
    """Yield a writable stream for ``path_or_file``.

    Open streams are used as-is and left open; paths are opened with
    ``mode`` and closed afterwards.
    """

    if hasattr(path_or_file, 'write'):
        yield path_or_file
        return
    if 'b' in mode:
        stream = open(path_or_file, mode)
    else:
        stream = open(path_or_file, mode, encoding=encoding, newline='\n')
    try:
        yield stream
    finally:
        stream.close()


def fixed6(value: float) -> str:
    """Format with six decimals, never printing a negative zero."""

    text = f'{value:.6f}'
    if text == '-0.000000':
        return '0.000000'
    return text
