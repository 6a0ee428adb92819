"""Codec for ``<properties>``, the one section whose element names are data.

The child names are chosen by the POM author, so no field table can
describe them. Decoding walks the token stream directly; encoding writes one
``<name>value</name>`` element per map entry.
"""

import logging

from .errors import TruncatedPropertiesSection
from .xml_tokens import CharData, EndElement, StartElement, TokenReader, TokenWriter, skip_element

logger = logging.getLogger(__name__)


def _truncated(properties: dict, start: StartElement, strict: bool) -> dict:
    if strict:
        raise TruncatedPropertiesSection(
            f"stream ended before </{start.name}> after {len(properties)} entries",
            partial=properties,
        )
    logger.debug("stream ended inside <%s>, returning %d entries", start.name, len(properties))
    return properties


def decode_properties(reader: TokenReader, start: StartElement, strict: bool = False) -> dict:
    """Decode the children of a properties wrapper into a dict.

    ``reader`` must be positioned just after ``start``. Each child element
    becomes one entry keyed by its local name with its text as the value;
    a repeated name keeps the last value. Elements nested inside a child
    are ignored and only the child's own text is kept. Reading stops at
    the wrapper's end tag.

    If the stream ends before that, the entries read so far are returned,
    or ``TruncatedPropertiesSection`` is raised when ``strict`` is set.
    """
    properties = {}
    while True:
        token = reader.next_token()
        if token is None:
            return _truncated(properties, start, strict)
        if isinstance(token, EndElement):
            return properties
        if not isinstance(token, StartElement):
            continue

        key = token.name
        parts = []
        while True:
            token = reader.next_token()
            if token is None:
                return _truncated(properties, start, strict)
            if isinstance(token, EndElement):
                break
            if isinstance(token, CharData):
                parts.append(token.text)
            else:
                logger.debug("ignoring <%s> nested in property <%s>", token.name, key)
                if not skip_element(reader):
                    return _truncated(properties, start, strict)
        properties[key] = "".join(parts)


def encode_properties(writer: TokenWriter, properties: dict, start: StartElement) -> None:
    """Write ``start``, one leaf element per entry, and the matching end tag.

    Entries are written in the dict's iteration order, without attributes.
    The writer is flushed afterwards; sink errors propagate as ``WriteFailure``.
    """
    writer.write(start)
    for key, value in properties.items():
        writer.leaf(key, value)
    writer.write(EndElement(start.name))
    writer.flush()
