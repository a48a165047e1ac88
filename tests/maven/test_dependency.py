# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for extracting the dependencies declared in a POM."""

from hypothesis import given
from hypothesis import strategies as st

from pommeta.maven.dependency import MavenDependency, extract_dependencies
from pommeta.parsers.pomparser import parse_pom_string

artifact_ids = st.lists(st.from_regex(r"[a-z][a-z0-9\-]{0,20}", fullmatch=True), max_size=15)


@given(names=artifact_ids)
def test_dependencies_keep_document_order(names: list[str]) -> None:
    """Test that the dependencies are returned in the order in which they are declared."""
    declarations = "".join(
        f"<dependency><groupId>com.example</groupId><artifactId>{name}</artifactId></dependency>" for name in names
    )
    pom = parse_pom_string(f"<project><dependencies>{declarations}</dependencies></project>")

    dependencies = extract_dependencies(pom)
    assert len(dependencies) == len(names)
    assert [dependency.artifact_id for dependency in dependencies] == names


def test_dependency_optional_fields() -> None:
    """Test that an undeclared version or scope is None, not an empty string."""
    pom = parse_pom_string(
        """
        <project xmlns="http://maven.apache.org/POM/4.0.0">
          <dependencies>
            <dependency>
              <groupId>com.azure</groupId>
              <artifactId>azure-core</artifactId>
            </dependency>
            <dependency>
              <groupId>org.junit.jupiter</groupId>
              <artifactId>junit-jupiter-api</artifactId>
              <version>5.9.3</version>
              <scope>test</scope>
            </dependency>
          </dependencies>
        </project>
        """
    )
    assert extract_dependencies(pom) == (
        MavenDependency("com.azure", "azure-core"),
        MavenDependency("org.junit.jupiter", "junit-jupiter-api", "5.9.3", "test"),
    )


def test_dependency_missing_group_id() -> None:
    """Test that a dependency without a groupId is kept with an empty groupId."""
    pom = parse_pom_string(
        "<project><dependencies><dependency><artifactId>a</artifactId></dependency></dependencies></project>"
    )
    assert extract_dependencies(pom) == (MavenDependency("", "a"),)


def test_dependencies_outside_project_section() -> None:
    """Test that dependencies of plugins or dependencyManagement are not extracted."""
    pom = parse_pom_string(
        """
        <project>
          <dependencyManagement>
            <dependencies>
              <dependency><groupId>com.azure</groupId><artifactId>azure-sdk-bom</artifactId></dependency>
            </dependencies>
          </dependencyManagement>
          <build><plugins><plugin><dependencies>
            <dependency><groupId>com.puppycrawl.tools</groupId><artifactId>checkstyle</artifactId></dependency>
          </dependencies></plugin></plugins></build>
        </project>
        """
    )
    assert extract_dependencies(pom) == ()


def test_dependency_purl() -> None:
    """Test the PackageURL of a dependency with and without a version."""
    assert str(MavenDependency("com.azure", "azure-core", "1.45.0").purl) == "pkg:maven/com.azure/azure-core@1.45.0"
    assert str(MavenDependency("com.azure", "azure-core").purl) == "pkg:maven/com.azure/azure-core"
