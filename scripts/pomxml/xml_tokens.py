"""Streaming XML tokens: a pull reader over a byte stream and a push writer.

The reader feeds chunks of the caller's stream to expat and hands out
start, end and character-data tokens one at a time. The writer pushes the
same tokens into a binary sink through ``XMLGenerator``. Both work on local
element names only; a default namespace is accepted on input and ignored.
"""

import logging
import re
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Optional, Union
from xml.parsers import expat
from xml.sax.saxutils import XMLGenerator, escape

from .config import DEFAULT_CHUNK_SIZE
from .errors import MalformedXML, WriteFailure

logger = logging.getLogger(__name__)

# Expat reports namespaced names as "<uri><sep><local>".
_NS_SEP = " "

# Characters outside the XML 1.0 Char production, lone surrogates included.
_INVALID_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")

# Parsers normalise a literal CR to LF, so it has to travel as a reference.
_TEXT_ENTITIES = {"\r": "&#13;"}


def clean_text(data: str) -> str:
    """Replace characters XML cannot carry with U+FFFD."""
    return _INVALID_CHARS.sub("\ufffd", data)


@dataclass(frozen=True)
class StartElement:
    name: str
    attrs: dict = field(default_factory=dict)


@dataclass(frozen=True)
class EndElement:
    name: str


@dataclass(frozen=True)
class CharData:
    text: str


Token = Union[StartElement, EndElement, CharData]


def _local(name: str) -> str:
    return name.rpartition(_NS_SEP)[2]


class TokenReader:
    """Pull tokens from a binary stream.

    ``next_token()`` returns ``None`` once the stream is exhausted and does
    not judge whether the document was complete; that is left to
    :meth:`close`, which drains the stream and runs expat's final check.
    Comments, processing instructions and the doctype produce no tokens.

    Args:
        source: Object with a ``read(size)`` method returning bytes (or str).
        chunk_size: Bytes requested per ``read`` call.
    """

    def __init__(self, source, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self._source = source
        self._chunk_size = chunk_size
        self._pending = deque()
        self._text = []
        self._eof = False
        parser = expat.ParserCreate(namespace_separator=_NS_SEP)
        parser.buffer_text = True
        parser.StartElementHandler = self._on_start
        parser.EndElementHandler = self._on_end
        parser.CharacterDataHandler = self._text.append
        self._parser = parser

    def _flush_text(self):
        if self._text:
            self._pending.append(CharData("".join(self._text)))
            self._text.clear()

    def _on_start(self, name, attrs):
        self._flush_text()
        self._pending.append(
            StartElement(_local(name), {_local(k): v for k, v in attrs.items()})
        )

    def _on_end(self, name):
        self._flush_text()
        self._pending.append(EndElement(_local(name)))

    def _parse(self, data, final=False):
        try:
            self._parser.Parse(data, final)
        except expat.ExpatError as exc:
            raise MalformedXML(
                expat.ErrorString(exc.code), line=exc.lineno, column=exc.offset
            ) from exc

    def _feed(self):
        chunk = self._source.read(self._chunk_size)
        if not chunk:
            self._eof = True
            self._flush_text()
            return
        self._parse(chunk)

    def next_token(self) -> Optional[Token]:
        """Return the next token, or ``None`` at end of stream."""
        while not self._pending:
            if self._eof:
                return None
            self._feed()
        return self._pending.popleft()

    def close(self):
        """Consume the rest of the stream and verify the document is complete.

        Raises:
            MalformedXML: If anything after the current position is not
                well-formed, or the root element was never closed.
        """
        while not self._eof:
            self._feed()
        self._pending.clear()
        self._parse(b"", True)


def skip_element(reader: TokenReader) -> bool:
    """Consume tokens up to and including the end of the current element.

    Call after the element's ``StartElement`` has been read.

    Returns:
        ``False`` if the stream ended before the element was closed.
    """
    depth = 1
    while depth:
        token = reader.next_token()
        if token is None:
            return False
        if isinstance(token, StartElement):
            depth += 1
        elif isinstance(token, EndElement):
            depth -= 1
    return True


class TokenWriter:
    """Push tokens into a binary sink.

    With ``indent`` set, elements that contain other elements have their
    children placed on separate, indented lines. Leaf elements keep their
    text exactly as given, except that characters XML cannot represent are
    replaced with U+FFFD.

    Args:
        sink: Object with a ``write(bytes)`` method; ``flush()`` is used if present.
        encoding: Output encoding.
        indent: Indentation unit, or ``None`` for compact output.
    """

    def __init__(self, sink, encoding: str = "UTF-8", indent: Optional[str] = None):
        self._sink = sink
        self._indent = indent
        self._open = []
        with self._guard():
            self._gen = XMLGenerator(sink, encoding, short_empty_elements=True)

    @contextmanager
    def _guard(self):
        try:
            yield
        except (OSError, ValueError) as exc:
            raise WriteFailure(f"output sink rejected write: {exc}") from exc

    def start_document(self):
        with self._guard():
            self._gen.startDocument()

    def end_document(self):
        if self._open:
            raise ValueError(f"<{self._open[-1][0]}> is still open")
        with self._guard():
            self._gen.ignorableWhitespace("\n")
        self.flush()

    def start(self, name: str, attrs: Optional[dict] = None):
        with self._guard():
            if self._open:
                self._open[-1][1] = True
                if self._indent is not None:
                    self._gen.ignorableWhitespace("\n" + self._indent * len(self._open))
            self._gen.startElement(name, {k: clean_text(v) for k, v in (attrs or {}).items()})
        self._open.append([name, False])

    def text(self, data: str):
        """Write character data.

        ``&``, ``<``, ``>`` and CR are escaped; characters XML does not
        allow become U+FFFD, so the output always parses back.
        """
        if not data:
            return
        with self._guard():
            # ignorableWhitespace is XMLGenerator's unescaped write
            self._gen.ignorableWhitespace(escape(clean_text(data), _TEXT_ENTITIES))

    def end(self, name: str):
        if not self._open or self._open[-1][0] != name:
            expected = self._open[-1][0] if self._open else None
            raise ValueError(f"</{name}> does not close <{expected}>")
        _, has_children = self._open.pop()
        with self._guard():
            if has_children and self._indent is not None:
                self._gen.ignorableWhitespace("\n" + self._indent * len(self._open))
            self._gen.endElement(name)

    def write(self, token: Token):
        if isinstance(token, StartElement):
            self.start(token.name, token.attrs)
        elif isinstance(token, EndElement):
            self.end(token.name)
        else:
            self.text(token.text)

    def leaf(self, name: str, value: str):
        self.start(name)
        self.text(value)
        self.end(name)

    def flush(self):
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            with self._guard():
                flush()
