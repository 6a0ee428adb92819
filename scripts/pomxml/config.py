"""Decode and encode options.

Plain dataclasses validated on construction. There are no environment
variables or config files; callers build the options they need.
"""

import codecs
from dataclasses import dataclass
from typing import Optional

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"

DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass
class DecodeOptions:
    """Options for :func:`pomxml.codec.decode`.

    Attributes:
        chunk_size: Number of bytes pulled from the source per read.
        strict_properties: Raise ``TruncatedPropertiesSection`` instead of
            returning a partial map when the stream ends inside ``<properties>``.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    strict_properties: bool = False

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")


@dataclass
class EncodeOptions:
    """Options for :func:`pomxml.codec.encode`.

    Attributes:
        encoding: Output character encoding, also named in the XML declaration.
        xml_declaration: Emit ``<?xml version="1.0" ...?>`` before the root.
        indent: Indentation unit for element-only content, or ``None`` for
            compact single-line output.
        namespace: Default namespace written as ``xmlns`` on ``<project>``,
            e.g. :data:`POM_NAMESPACE`. ``None`` writes no namespace.
    """

    encoding: str = "UTF-8"
    xml_declaration: bool = True
    indent: Optional[str] = "  "
    namespace: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.encoding:
            raise ValueError("encoding must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {self.encoding}") from exc
        if self.indent is not None and self.indent.strip():
            raise ValueError("indent must contain only whitespace")
