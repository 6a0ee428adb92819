"""Maven data model classes.

Pure data structures representing the fixed-schema parts of a POM. Every
field is optional and defaults to its empty value; each field also declares
the element path it maps to, which ``binding`` uses in both directions.
Field order is the order elements are written in.
"""

from dataclasses import dataclass
from typing import Optional

from .shape import property_map, record, records, text, texts


@dataclass
class Parent:
    """A ``<parent>`` element: coordinates of the POM this one inherits from.

    This is a value, not a link to another loaded project.
    """
    group_id: str = text("groupId")
    artifact_id: str = text("artifactId")
    version: str = text("version")


@dataclass
class Exclusion:
    """An ``<exclusion>``: a transitive dependency to suppress."""
    group_id: str = text("groupId")
    artifact_id: str = text("artifactId")


@dataclass
class Dependency:
    """A Maven ``<dependency>`` element.

    Attributes:
        group_id: Maven groupId (e.g. ``org.springframework.boot``).
        artifact_id: Maven artifactId (e.g. ``spring-boot-starter-web``).
        version: Version string, empty if managed elsewhere.
        classifier: Optional classifier (e.g. ``sources``, ``tests``).
        type: Packaging type (e.g. ``pom`` for BOM imports).
        scope: compile, provided, runtime, test, system or import.
        exclusions: ``<exclusions>`` in document order.
    """
    group_id: str = text("groupId")
    artifact_id: str = text("artifactId")
    version: str = text("version")
    classifier: str = text("classifier")
    type: str = text("type")
    scope: str = text("scope")
    exclusions: list = records("exclusions/exclusion", Exclusion)

    @property
    def key(self) -> tuple:
        """Identity used for matching: ``(groupId, artifactId, classifier)``."""
        return (self.group_id, self.artifact_id, self.classifier or "")


@dataclass
class DependencyManagement:
    """``<dependencyManagement>``: default versions, not resolved here."""
    dependencies: list = records("dependencies/dependency", Dependency)

    def version_for(self, dep: Dependency) -> Optional[str]:
        """Version declared for an entry with the same :attr:`Dependency.key`.

        Entries without a version are passed over. ``${...}`` references are
        returned as written.
        """
        return next(
            (m.version for m in self.dependencies if m.key == dep.key and m.version),
            None,
        )


@dataclass
class Repository:
    """A ``<repository>`` under ``<repositories>``."""
    id: str = text("id")
    name: str = text("name")
    url: str = text("url")


@dataclass
class PluginRepository:
    """A ``<pluginRepository>``. Same shape as :class:`Repository`."""
    id: str = text("id")
    name: str = text("name")
    url: str = text("url")


@dataclass
class Plugin:
    """A Maven ``<plugin>`` element.

    ``<executions>`` and ``<configuration>`` are not modeled and are
    dropped on decode.
    """
    group_id: str = text("groupId")
    artifact_id: str = text("artifactId")
    version: str = text("version")


@dataclass
class Build:
    """A ``<build>`` block; only its ``<plugins>`` are modeled."""
    plugins: list = records("plugins/plugin", Plugin)


@dataclass
class Profile:
    """A ``<profile>`` under ``<profiles>``.

    Activation, profile-scoped dependencies and properties are not modeled
    and are dropped on decode.

    Attributes:
        id: The ``<id>`` of the profile.
        build: The profile's own ``<build>`` block.
    """
    id: str = text("id")
    build: Build = record("build", Build)


@dataclass
class Project:
    """Root ``<project>`` of a POM.

    Attributes:
        model_version: ``<modelVersion>``, normally ``4.0.0``.
        parent: ``<parent>`` coordinates.
        group_id: Maven groupId as declared (not inherited).
        artifact_id: Maven artifactId.
        version: Version as declared (not inherited).
        packaging: jar, pom, war, ...
        name: Human-readable ``<name>``.
        description: ``<description>``.
        repositories: ``<repositories>`` in document order.
        properties: ``<properties>`` as a ``name -> value`` dict.
        dependency_management: ``<dependencyManagement>`` block.
        dependencies: Direct ``<dependencies>`` in document order.
        profiles: ``<profiles>`` in document order.
        build: ``<build>`` block.
        plugin_repositories: ``<pluginRepositories>`` in document order.
        modules: Child module names from ``<modules>``.
    """
    model_version: str = text("modelVersion")
    parent: Parent = record("parent", Parent)
    group_id: str = text("groupId")
    artifact_id: str = text("artifactId")
    version: str = text("version")
    packaging: str = text("packaging")
    name: str = text("name")
    description: str = text("description")
    repositories: list = records("repositories/repository", Repository)
    properties: dict = property_map("properties")
    dependency_management: DependencyManagement = record("dependencyManagement", DependencyManagement)
    dependencies: list = records("dependencies/dependency", Dependency)
    profiles: list = records("profiles/profile", Profile)
    build: Build = record("build", Build)
    plugin_repositories: list = records("pluginRepositories/pluginRepository", PluginRepository)
    modules: list = texts("modules/module")
