"""Declarative field-to-element mapping for POM records.

Each model field carries a :class:`FieldShape` in its dataclass metadata,
declared next to the field itself. The generic codec in ``binding`` reads
these tables; nothing is registered globally.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Optional

SHAPE_KEY = "pom"


class Kind(Enum):
    TEXT = "text"
    RECORD = "record"
    RECORDS = "records"
    TEXTS = "texts"
    PROPERTIES = "properties"


@dataclass(frozen=True)
class FieldShape:
    """Where a field lives in the document.

    Attributes:
        attr: Python attribute name on the record.
        path: Element path segments, e.g. ``("repositories", "repository")``.
        kind: How the content is decoded.
        item: Record class for ``RECORD``/``RECORDS`` fields.
    """
    attr: str
    path: tuple
    kind: Kind
    item: Optional[type] = None

    @property
    def element(self) -> str:
        return self.path[0]


def _field(path: str, kind: Kind, item=None, **kwargs):
    return field(metadata={SHAPE_KEY: (tuple(path.split("/")), kind, item)}, **kwargs)


def text(path: str):
    """A single text leaf, ``""`` when absent."""
    return _field(path, Kind.TEXT, default="")


def record(path: str, cls: type):
    """A nested record, all-empty when absent."""
    return _field(path, Kind.RECORD, cls, default_factory=cls)


def records(path: str, cls: type):
    """Repeated records under a wrapper, e.g. ``"dependencies/dependency"``."""
    return _field(path, Kind.RECORDS, cls, default_factory=list)


def texts(path: str):
    """Repeated text leaves under a wrapper, e.g. ``"modules/module"``."""
    return _field(path, Kind.TEXTS, default_factory=list)


def property_map(path: str):
    """An element whose children are arbitrary ``name -> text`` pairs."""
    return _field(path, Kind.PROPERTIES, default_factory=dict)


def shape_of(cls) -> list:
    """Return the ordered :class:`FieldShape` table of a record class."""
    table = []
    for f in fields(cls):
        path, kind, item = f.metadata[SHAPE_KEY]
        table.append(FieldShape(f.name, path, kind, item))
    return table


def is_empty(value) -> bool:
    """Whether a value is omitted on encode.

    Empty strings, lists and dicts are empty, and so is a record whose
    fields are all empty.
    """
    if value is None:
        return True
    if is_dataclass(value):
        return all(is_empty(getattr(value, f.name)) for f in fields(value))
    return len(value) == 0
