"""Shared test fixtures for the POM codec test suite."""

import io
import textwrap

import pytest

from pomxml.pom_models import (
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


@pytest.fixture
def pom_source():
    """Factory fixture that turns a POM snippet into a readable byte stream."""
    def _source(content: str) -> io.BytesIO:
        return io.BytesIO(textwrap.dedent(content).encode("utf-8"))
    return _source


@pytest.fixture
def simple_project():
    """A minimal single-module Project for use in encoder tests."""
    return Project(
        model_version="4.0.0",
        group_id="com.example",
        artifact_id="demo",
        version="1.0.0",
        properties={"java.version": "21"},
        dependencies=[
            Dependency(
                group_id="org.springframework.boot",
                artifact_id="spring-boot-starter-web",
            ),
            Dependency(
                group_id="org.junit.jupiter",
                artifact_id="junit-jupiter",
                scope="test",
            ),
        ],
    )


@pytest.fixture
def full_project():
    """A Project that sets every modeled field at least once."""
    return Project(
        model_version="4.0.0",
        parent=Parent(
            group_id="org.springframework.boot",
            artifact_id="spring-boot-starter-parent",
            version="3.4.1",
        ),
        group_id="com.example",
        artifact_id="parent",
        version="1.0.0",
        packaging="pom",
        name="Example Parent",
        description="Builds <core> & <web>",
        repositories=[
            Repository(id="central", name="Maven Central", url="https://repo.maven.apache.org/maven2"),
            Repository(id="spring-milestones", url="https://repo.spring.io/milestone"),
        ],
        properties={
            "java.version": "21",
            "skipTests": "true",
            "spring-cloud.version": "2024.0.0",
            "empty.value": "",
        },
        dependency_management=DependencyManagement(
            dependencies=[
                Dependency(
                    group_id="org.springframework.cloud",
                    artifact_id="spring-cloud-dependencies",
                    version="${spring-cloud.version}",
                    type="pom",
                    scope="import",
                ),
            ],
        ),
        dependencies=[
            Dependency(
                group_id="org.springframework.boot",
                artifact_id="spring-boot-starter-web",
                exclusions=[
                    Exclusion(group_id="org.springframework.boot", artifact_id="spring-boot-starter-tomcat"),
                    Exclusion(group_id="org.slf4j", artifact_id="slf4j-simple"),
                ],
            ),
            Dependency(
                group_id="com.example",
                artifact_id="fixtures",
                version="1.0.0",
                classifier="tests",
                type="test-jar",
                scope="test",
            ),
        ],
        profiles=[
            Profile(
                id="native",
                build=Build(plugins=[Plugin(group_id="org.graalvm.buildtools", artifact_id="native-maven-plugin")]),
            ),
            Profile(id="ci"),
        ],
        build=Build(
            plugins=[
                Plugin(group_id="org.springframework.boot", artifact_id="spring-boot-maven-plugin"),
                Plugin(artifact_id="maven-compiler-plugin", version="3.13.0"),
            ],
        ),
        plugin_repositories=[
            PluginRepository(id="plugins", name="Plugins", url="https://plugins.example.com"),
        ],
        modules=["core", "web"],
    )
