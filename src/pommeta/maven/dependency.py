# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module extracts the dependencies declared in a POM."""

import logging
from dataclasses import dataclass
from xml.etree.ElementTree import Element  # nosec B405

from packageurl import PackageURL

from pommeta.parsers.pom_query import find_nodes, find_text

logger: logging.Logger = logging.getLogger(__name__)

DEPENDENCY_PATH = "/project/dependencies/dependency"


@dataclass(frozen=True)
class MavenDependency:
    """A ``<dependency>`` declared in the ``<dependencies>`` section of a POM.

    The version and scope are often left to ``dependencyManagement`` or to Maven's defaults,
    so they are None when the POM does not declare them.
    """

    group_id: str
    artifact_id: str
    version: str | None = None
    scope: str | None = None

    @property
    def purl(self) -> PackageURL:
        """Return the Maven PackageURL of this dependency."""
        return PackageURL(type="maven", namespace=self.group_id or None, name=self.artifact_id, version=self.version)


def extract_dependencies(pom: Element) -> tuple[MavenDependency, ...]:
    """Return the dependencies of the POM in the order in which they are declared.

    A dependency missing its ``groupId`` or ``artifactId`` is kept with an empty string for that field.

    Parameters
    ----------
    pom : Element
        The root element of the POM.

    Returns
    -------
    tuple[MavenDependency, ...]
        The declared dependencies.
    """
    dependencies = []
    for node in find_nodes(pom, DEPENDENCY_PATH):
        dependencies.append(
            MavenDependency(
                group_id=find_text(node, "groupId") or "",
                artifact_id=find_text(node, "artifactId") or "",
                version=find_text(node, "version"),
                scope=find_text(node, "scope"),
            )
        )

    logger.debug("Found %d dependencies.", len(dependencies))
    return tuple(dependencies)
