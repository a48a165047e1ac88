# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Tests for the path queries evaluated against parsed POMs."""

import pytest

from pommeta.parsers.pom_query import find_node, find_nodes, find_text, local_name, text_content
from pommeta.parsers.pomparser import parse_pom_string

POM_WITH_NAMESPACE = """
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <artifactId>example</artifactId>
  <properties>
    <jacoco.min.linecoverage>0.40</jacoco.min.linecoverage>
  </properties>
  <dependencies>
    <dependency><artifactId>first</artifactId></dependency>
    <dependency><artifactId>second</artifactId></dependency>
  </dependencies>
</project>
"""

POM_WITHOUT_NAMESPACE = POM_WITH_NAMESPACE.replace(' xmlns="http://maven.apache.org/POM/4.0.0"', "")


@pytest.mark.parametrize("pom_string", [POM_WITH_NAMESPACE, POM_WITHOUT_NAMESPACE])
def test_find_nodes_in_document_order(pom_string: str) -> None:
    """Test that all matches are returned in document order, with or without a namespace."""
    pom = parse_pom_string(pom_string)
    dependencies = find_nodes(pom, "/project/dependencies/dependency")
    assert [find_text(dependency, "artifactId") for dependency in dependencies] == ["first", "second"]


@pytest.mark.parametrize("pom_string", [POM_WITH_NAMESPACE, POM_WITHOUT_NAMESPACE])
def test_find_text_dotted_name(pom_string: str) -> None:
    """Test that element names containing dots can be queried."""
    pom = parse_pom_string(pom_string)
    assert find_text(pom, "/project/properties/jacoco.min.linecoverage") == "0.40"


def test_find_node_absolute_root() -> None:
    """Test that an absolute path naming only the root matches the root."""
    pom = parse_pom_string(POM_WITH_NAMESPACE)
    assert find_node(pom, "/project") is pom


def test_find_node_absolute_wrong_root() -> None:
    """Test that an absolute path starting with another element name matches nothing."""
    pom = parse_pom_string(POM_WITH_NAMESPACE)
    assert find_node(pom, "/settings/artifactId") is None
    assert not find_nodes(pom, "/settings")


def test_find_node_relative() -> None:
    """Test that a relative path is evaluated against the children of the node."""
    pom = parse_pom_string(POM_WITH_NAMESPACE)
    assert find_text(pom, "artifactId") == "example"
    # The root element is not one of its own children.
    assert find_node(pom, "project") is None


def test_find_text_missing() -> None:
    """Test that a path without match gives None rather than an empty string."""
    pom = parse_pom_string(POM_WITH_NAMESPACE)
    assert find_text(pom, "/project/version") is None


def test_find_text_empty_element() -> None:
    """Test that an element without text gives an empty string."""
    pom = parse_pom_string("<project><version/></project>")
    assert find_text(pom, "/project/version") == ""


def test_text_content_includes_descendants() -> None:
    """Test that text content concatenates the text of all descendants verbatim."""
    pom = parse_pom_string("<project><name> a<b>b</b>c </name></project>")
    name = find_node(pom, "/project/name")
    assert name is not None
    assert text_content(name) == " abc "


@pytest.mark.parametrize("path", ["", "/", "/project//artifactId", "dependency[1]", "*", "../project", "a b"])
def test_invalid_path(path: str) -> None:
    """Test that paths that are not plain element names are rejected."""
    pom = parse_pom_string(POM_WITH_NAMESPACE)
    with pytest.raises(ValueError, match="Invalid step"):
        find_nodes(pom, path)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("{http://maven.apache.org/POM/4.0.0}project", "project"),
        ("project", "project"),
    ],
)
def test_local_name(tag: str, expected: str) -> None:
    """Test removing the namespace prefix of a tag."""
    assert local_name(tag) == expected
