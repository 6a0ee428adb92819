"""Public entry points: POM bytes to :class:`Project` and back.

The caller owns the streams. ``decode`` pulls from anything with
``read(size)``; ``encode`` pushes into anything with ``write(bytes)``.
"""

import io
import logging
from typing import Optional, Union

from .binding import decode_record, encode_record
from .config import DecodeOptions, EncodeOptions
from .errors import MalformedXML, UnexpectedStructure
from .pom_models import Project
from .xml_tokens import StartElement, TokenReader, TokenWriter

logger = logging.getLogger(__name__)

ROOT_ELEMENT = "project"


def decode(source, options: Optional[DecodeOptions] = None) -> Project:
    """Decode a POM document from a binary stream.

    Handles both namespaced and non-namespaced POM files. Elements the model
    does not declare are dropped.

    Args:
        source: Readable binary stream positioned at the start of the document.
        options: Decode options; defaults to :class:`DecodeOptions`.

    Returns:
        A new :class:`Project`. Nothing is shared between calls.

    Raises:
        MalformedXML: The stream is not a complete, well-formed document.
        UnexpectedStructure: The root is not ``<project>`` or a text field
            contains child elements.
        TruncatedPropertiesSection: Only with ``strict_properties``, when the
            stream ends inside ``<properties>``.
    """
    options = options or DecodeOptions()
    reader = TokenReader(source, chunk_size=options.chunk_size)

    root = reader.next_token()
    while root is not None and not isinstance(root, StartElement):
        root = reader.next_token()
    if root is None:
        reader.close()
        raise MalformedXML("document has no root element")
    if root.name != ROOT_ELEMENT:
        raise UnexpectedStructure(f"root element is <{root.name}>, expected <{ROOT_ELEMENT}>")

    project = decode_record(reader, Project, root, options)
    reader.close()
    logger.debug(
        "decoded %s:%s with %d dependencies and %d properties",
        project.group_id, project.artifact_id,
        len(project.dependencies), len(project.properties),
    )
    return project


def encode(project: Project, sink, options: Optional[EncodeOptions] = None) -> None:
    """Encode ``project`` as a POM document into a binary sink.

    Empty fields produce no element. The sink is flushed before returning.

    Raises:
        WriteFailure: The sink rejected a write or flush. Some bytes may
            already have been written; they do not form a valid document.
    """
    options = options or EncodeOptions()
    writer = TokenWriter(sink, encoding=options.encoding, indent=options.indent)
    if options.xml_declaration:
        writer.start_document()
    attrs = {"xmlns": options.namespace} if options.namespace else None
    encode_record(writer, project, ROOT_ELEMENT, attrs)
    writer.end_document()
    logger.debug("encoded %s:%s", project.group_id, project.artifact_id)


def loads(data: Union[bytes, str], options: Optional[DecodeOptions] = None) -> Project:
    """Decode a POM held in memory."""
    source = io.StringIO(data) if isinstance(data, str) else io.BytesIO(data)
    return decode(source, options)


def dumps(project: Project, options: Optional[EncodeOptions] = None) -> bytes:
    """Encode ``project`` and return the document bytes."""
    sink = io.BytesIO()
    encode(project, sink, options)
    return sink.getvalue()
