"""Tests for pom_models.py: dependency identity and managed versions."""

from pomxml.pom_models import Dependency, DependencyManagement


class TestDependencyKey:
    def test_classifier_defaults_to_empty(self):
        assert Dependency(group_id="g", artifact_id="a").key == ("g", "a", "")

    def test_version_and_scope_are_not_part_of_key(self):
        first = Dependency(group_id="g", artifact_id="a", classifier="c", version="1", scope="test")
        second = Dependency(group_id="g", artifact_id="a", classifier="c", version="2")
        assert first.key == second.key == ("g", "a", "c")


class TestVersionFor:
    def test_classifier_distinguishes_entries(self):
        management = DependencyManagement(dependencies=[
            Dependency(group_id="g", artifact_id="a", classifier="tests", version="2.0"),
            Dependency(group_id="g", artifact_id="a", version="1.0"),
        ])
        assert management.version_for(Dependency(group_id="g", artifact_id="a")) == "1.0"
        assert management.version_for(Dependency(group_id="g", artifact_id="a", classifier="tests")) == "2.0"

    def test_unmanaged_dependency(self):
        management = DependencyManagement(dependencies=[Dependency(group_id="g", artifact_id="a", version="1.0")])
        assert management.version_for(Dependency(group_id="g", artifact_id="b")) is None

    def test_versionless_entry_is_passed_over(self):
        management = DependencyManagement(dependencies=[
            Dependency(group_id="g", artifact_id="a"),
            Dependency(group_id="g", artifact_id="a", version="${lib.version}"),
        ])
        assert management.version_for(Dependency(group_id="g", artifact_id="a")) == "${lib.version}"

    def test_empty_management(self):
        assert DependencyManagement().version_for(Dependency(group_id="g", artifact_id="a")) is None
