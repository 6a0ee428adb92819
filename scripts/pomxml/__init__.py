"""Typed model and lossless XML codec for Maven POM documents."""

from .codec import decode, dumps, encode, loads
from .config import POM_NAMESPACE, DecodeOptions, EncodeOptions
from .errors import MalformedXML, PomError, TruncatedPropertiesSection, UnexpectedStructure, WriteFailure
from .pom_models import (
    Build,
    Dependency,
    DependencyManagement,
    Exclusion,
    Parent,
    Plugin,
    PluginRepository,
    Profile,
    Project,
    Repository,
)

__all__ = [
    "decode", "encode", "loads", "dumps",
    "DecodeOptions", "EncodeOptions", "POM_NAMESPACE",
    "PomError", "MalformedXML", "UnexpectedStructure", "TruncatedPropertiesSection", "WriteFailure",
    "Project", "Parent", "Dependency", "Exclusion", "DependencyManagement",
    "Repository", "PluginRepository", "Profile", "Build", "Plugin",
]
