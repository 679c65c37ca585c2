import io
import os
from abc import ABC, abstractmethod
from collections import deque
from pathlib import Path

import requests

URL_SCHEMES = ("http://", "https://")


class SourceUnreadable(Exception):
    """The chosen input could not be opened, or failed while being read."""

    def __init__(self, message, target=None):
        super().__init__(message)
        self.target = target


class TextSource(ABC):
    """Forward-only stream of whitespace-delimited words."""

    @abstractmethod
    def has_next_word(self):
        raise NotImplementedError

    @abstractmethod
    def get_next_word(self):
        raise NotImplementedError

    def close(self):
        return None

    def __iter__(self):
        while self.has_next_word():
            yield self.get_next_word()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class StreamTextSource(TextSource):
    """Reads lines lazily from an iterable of lines or a readable stream.

    Byte streams are decoded with ``encoding``. Lines are only pulled when
    ``has_next_word`` needs them, so nothing past the next word is buffered
    beyond the current line.
    """

    read_errors = (OSError, UnicodeDecodeError, ValueError)

    def __init__(self, stream, encoding="utf-8", target=None):
        self.target = target
        self.encoding = encoding
        if hasattr(stream, "read") and not isinstance(stream, io.TextIOBase):
            mode = str(getattr(stream, "mode", ""))
            if "b" in mode or isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
                stream = io.TextIOWrapper(stream, encoding=encoding)
        self._stream = stream
        self._lines = self._line_iterator(stream)
        self._pending = deque()
        self._exhausted = False

    def _line_iterator(self, stream):
        try:
            return iter(stream)
        except TypeError:
            pass
        readline = getattr(stream, "readline", None)
        if readline is None:
            raise SourceUnreadable(f"Cannot read lines from {type(stream).__name__}", self.target)
        return _iter_readline(readline)

    def _fill(self):
        while not self._pending and not self._exhausted:
            try:
                line = next(self._lines)
            except StopIteration:
                self._exhausted = True
                self.close()
                break
            except self.read_errors as exc:
                self._exhausted = True
                self.close()
                raise SourceUnreadable(f"Failed while reading {self._describe()}: {exc}", self.target) from exc
            if isinstance(line, bytes):
                try:
                    line = line.decode(self.encoding)
                except UnicodeDecodeError as exc:
                    self._exhausted = True
                    self.close()
                    raise SourceUnreadable(f"Failed while reading {self._describe()}: {exc}", self.target) from exc
            self._pending.extend(line.split())

    def has_next_word(self):
        self._fill()
        return bool(self._pending)

    def get_next_word(self):
        if not self.has_next_word():
            raise LookupError("no more words")
        return self._pending.popleft()

    def close(self):
        closer = getattr(self._stream, "close", None)
        if closer is not None:
            closer()

    def _describe(self):
        return str(self.target) if self.target is not None else "text stream"


class StringTextSource(StreamTextSource):
    def __init__(self, text):
        super().__init__(io.StringIO(text), target="<text>")


class FileTextSource(StreamTextSource):
    def __init__(self, path, encoding="utf-8"):
        path = Path(path)
        try:
            handle = open(path, "r", encoding=encoding)
        except OSError as exc:
            raise SourceUnreadable(f"Cannot open {path}: {exc}", path) from exc
        super().__init__(handle, encoding=encoding, target=path)


class UrlTextSource(StreamTextSource):
    """Remote text fetched with one streamed GET, opened before playback."""

    read_errors = StreamTextSource.read_errors + (requests.RequestException,)

    def __init__(self, url, timeout=None, encoding="utf-8"):
        try:
            resp = requests.get(url, stream=True, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise SourceUnreadable(f"Cannot fetch {url}: {exc}", url) from exc
        if not resp.encoding:
            resp.encoding = encoding
        self._response = resp
        super().__init__(resp.iter_lines(decode_unicode=True), encoding=encoding, target=url)

    def close(self):
        self._response.close()


def _iter_readline(readline):
    while True:
        line = readline()
        if not line:
            return
        yield line


def is_url(value):
    return isinstance(value, str) and value.strip().lower().startswith(URL_SCHEMES)


def open_source(target, *, raw=False, encoding="utf-8", timeout=None):
    """Open ``target`` as a word source.

    Strings are file paths unless they carry an http(s) scheme, or ``raw`` is
    set, in which case the string itself is the text.
    """
    if isinstance(target, TextSource):
        return target
    if raw:
        if not isinstance(target, str):
            raise TypeError(f"raw text must be str, not {type(target).__name__}")
        return StringTextSource(target)
    if is_url(target):
        return UrlTextSource(target.strip(), timeout=timeout, encoding=encoding)
    if isinstance(target, (str, os.PathLike)):
        return FileTextSource(target, encoding=encoding)
    if hasattr(target, "read"):
        return StreamTextSource(target, encoding=encoding)
    raise TypeError(f"Unsupported text source: {type(target).__name__}")
