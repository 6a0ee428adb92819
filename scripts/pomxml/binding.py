"""Generic record codec driven by the field tables in ``shape``.

Fixed-schema elements are mapped field by field. The properties field is
handed to ``properties``, which reads and writes its own tokens.
"""

from typing import Optional

from .errors import MalformedXML, UnexpectedStructure
from .properties import decode_properties, encode_properties
from .shape import FieldShape, Kind, is_empty, shape_of
from .xml_tokens import CharData, EndElement, StartElement, TokenReader, TokenWriter, skip_element


def _eof(name: str) -> MalformedXML:
    return MalformedXML(f"unexpected end of document inside <{name}>")


def read_text(reader: TokenReader, start: StartElement) -> str:
    """Read a leaf element's character data up to its end tag.

    Raises:
        UnexpectedStructure: If the element contains child elements.
        MalformedXML: If the stream ends first.
    """
    parts = []
    while True:
        token = reader.next_token()
        if token is None:
            raise _eof(start.name)
        if isinstance(token, EndElement):
            return "".join(parts)
        if isinstance(token, StartElement):
            raise UnexpectedStructure(
                f"<{start.name}> must contain only text, found <{token.name}>"
            )
        parts.append(token.text)


def _skip(reader: TokenReader, start: StartElement) -> None:
    if not skip_element(reader):
        raise _eof(start.name)


def _decode_value(reader, spec: FieldShape, start: StartElement, options):
    if spec.kind in (Kind.TEXT, Kind.TEXTS):
        return read_text(reader, start)
    if spec.kind is Kind.PROPERTIES:
        return decode_properties(reader, start, strict=options.strict_properties)
    return decode_record(reader, spec.item, start, options)


def _decode_wrapped(reader, spec: FieldShape, wrapper: StartElement, items: list, options) -> None:
    item_name = spec.path[1]
    while True:
        token = reader.next_token()
        if token is None:
            raise _eof(wrapper.name)
        if isinstance(token, EndElement):
            return
        if isinstance(token, StartElement):
            if token.name == item_name:
                items.append(_decode_value(reader, spec, token, options))
            else:
                _skip(reader, token)


def decode_record(reader: TokenReader, cls, start: StartElement, options):
    """Build a ``cls`` instance from the content of ``start``.

    ``reader`` must be positioned just after ``start``; on return the
    matching end tag has been consumed. Unknown child elements are dropped
    and a repeated scalar element keeps its last value.
    """
    table = {spec.element: spec for spec in shape_of(cls)}
    obj = cls()
    while True:
        token = reader.next_token()
        if token is None:
            raise _eof(start.name)
        if isinstance(token, EndElement):
            return obj
        if isinstance(token, CharData):
            continue

        spec = table.get(token.name)
        if spec is None:
            _skip(reader, token)
        elif spec.kind in (Kind.RECORDS, Kind.TEXTS):
            _decode_wrapped(reader, spec, token, getattr(obj, spec.attr), options)
        else:
            setattr(obj, spec.attr, _decode_value(reader, spec, token, options))


def _encode_item(writer: TokenWriter, spec: FieldShape, name: str, value) -> None:
    if spec.kind in (Kind.TEXT, Kind.TEXTS):
        writer.leaf(name, value)
    elif spec.kind is Kind.PROPERTIES:
        encode_properties(writer, value, StartElement(name))
    else:
        encode_record(writer, value, name)


def encode_record(writer: TokenWriter, obj, name: str, attrs: Optional[dict] = None) -> None:
    """Write ``obj`` as element ``name``, omitting every empty field.

    Items of repeated fields are written even when empty so that the
    length of each list survives a round trip.
    """
    writer.start(name, attrs)
    for spec in shape_of(type(obj)):
        value = getattr(obj, spec.attr)
        if is_empty(value):
            continue
        if spec.kind in (Kind.RECORDS, Kind.TEXTS):
            wrapper, item_name = spec.path
            writer.start(wrapper)
            for item in value:
                _encode_item(writer, spec, item_name, item)
            writer.end(wrapper)
        else:
            _encode_item(writer, spec, spec.element, value)
    writer.end(name)
