# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module extracts the project metadata of a Maven module from its POM.

The metadata is extracted in a single pass over a parsed POM into an immutable
:class:`ProjectMetadata`. Either the whole extraction succeeds, or an error derived from
:class:`pommeta.errors.PomMetadataError` is raised; no partial result is returned.
"""

import configparser
import logging
import os
from dataclasses import dataclass, field
from typing import Any, BinaryIO
from xml.etree.ElementTree import Element  # nosec B405

from pommeta.errors import NoIdentityAvailableError
from pommeta.maven.coordinate import PARENT_PATH, PROJECT_PATH, MavenCoordinate, resolve_coordinate
from pommeta.maven.coverage import BRANCH_COVERAGE_PROPERTY, LINE_COVERAGE_PROPERTY, extract_coverage_threshold
from pommeta.maven.dependency import MavenDependency, extract_dependencies
from pommeta.maven.plugins import (
    CHECKSTYLE_PLUGIN,
    ENFORCER_PLUGIN,
    extract_checkstyle_excludes,
    extract_enforcer_includes,
)
from pommeta.parsers.pom_query import find_node
from pommeta.parsers.pomparser import parse_pom_file, parse_pom_stream

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetadataNames:
    """The names used to locate the coverage properties and plugin configurations in a POM."""

    #: The property holding the minimum line coverage ratio.
    line_coverage_property: str = LINE_COVERAGE_PROPERTY

    #: The property holding the minimum branch coverage ratio.
    branch_coverage_property: str = BRANCH_COVERAGE_PROPERTY

    #: The artifactId of the plugin whose ``configuration/excludes`` is read.
    checkstyle_plugin: str = CHECKSTYLE_PLUGIN

    #: The artifactId of the plugin whose ``bannedDependencies`` includes are read.
    enforcer_plugin: str = ENFORCER_PLUGIN

    @classmethod
    def from_config(cls, config: configparser.ConfigParser) -> "MetadataNames":
        """Read the names from the ``[pom.metadata]`` section, falling back to the built-in names."""
        section = "pom.metadata"
        return cls(
            line_coverage_property=config.get(section, "line_coverage_property", fallback=LINE_COVERAGE_PROPERTY),
            branch_coverage_property=config.get(
                section, "branch_coverage_property", fallback=BRANCH_COVERAGE_PROPERTY
            ),
            checkstyle_plugin=config.get(section, "checkstyle_plugin", fallback=CHECKSTYLE_PLUGIN),
            enforcer_plugin=config.get(section, "enforcer_plugin", fallback=ENFORCER_PLUGIN),
        )


@dataclass(frozen=True)
class ProjectMetadata:
    """The metadata of a Maven module.

    ``identity`` holds the coordinate as declared by the module. A module may leave out its
    groupId and version and inherit them from its parent; use :attr:`effective_group_id` and
    :attr:`effective_version` to get the values that apply.
    """

    #: The coordinate declared by the module itself.
    identity: MavenCoordinate

    #: The coordinate of the parent module, or None if the POM has no ``<parent>``.
    parent_identity: MavenCoordinate | None = None

    #: The declared dependencies, in document order.
    dependencies: tuple[MavenDependency, ...] = ()

    #: The minimum line coverage ratio enforced by JaCoCo.
    min_line_coverage: float | None = None

    #: The minimum branch coverage ratio enforced by JaCoCo.
    min_branch_coverage: float | None = None

    #: The files excluded from checkstyle analysis, verbatim from the POM.
    analysis_exclude_pattern: str | None = None

    #: The coordinates exempted from the enforcer's ``bannedDependencies`` rule.
    allowed_dependency_coordinates: tuple[str, ...] = ()

    #: The name of the document the metadata was extracted from.
    source: str = field(default="", compare=False)

    @classmethod
    def from_coordinate(cls, group_id: str, artifact_id: str, version: str) -> "ProjectMetadata":
        """Create the metadata of a module known only by its coordinate."""
        return cls(identity=MavenCoordinate(group_id=group_id, artifact_id=artifact_id, version=version))

    @property
    def artifact_id(self) -> str:
        """Return the artifactId of the module, which is never inherited."""
        return self.identity.artifact_id

    @property
    def effective_group_id(self) -> str:
        """Return the declared groupId, or the parent's groupId if the module declares none.

        Raises
        ------
        NoIdentityAvailableError
            If the module declares no groupId and has no parent.
        """
        if self.identity.group_id is not None:
            return self.identity.group_id
        if self.parent_identity is None or self.parent_identity.group_id is None:
            raise NoIdentityAvailableError("groupId", self.source)
        return self.parent_identity.group_id

    @property
    def effective_version(self) -> str:
        """Return the declared version, or the parent's version if the module declares none.

        Raises
        ------
        NoIdentityAvailableError
            If the module declares no version and has no parent.
        """
        if self.identity.version is not None:
            return self.identity.version
        if self.parent_identity is None or self.parent_identity.version is None:
            raise NoIdentityAvailableError("version", self.source)
        return self.parent_identity.version

    @property
    def effective_identity(self) -> MavenCoordinate:
        """Return the coordinate of the module with inherited values filled in."""
        return MavenCoordinate(
            group_id=self.effective_group_id,
            artifact_id=self.artifact_id,
            version=self.effective_version,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the metadata as a JSON serializable dictionary.

        The effective groupId and version are None if they cannot be determined.
        """
        try:
            effective_group_id: str | None = self.effective_group_id
        except NoIdentityAvailableError:
            effective_group_id = None
        try:
            effective_version: str | None = self.effective_version
        except NoIdentityAvailableError:
            effective_version = None

        parent = self.parent_identity
        return {
            "source": self.source,
            "groupId": effective_group_id,
            "artifactId": self.artifact_id,
            "version": effective_version,
            "declaredGroupId": self.identity.group_id,
            "declaredVersion": self.identity.version,
            "parent": (
                None
                if parent is None
                else {"groupId": parent.group_id, "artifactId": parent.artifact_id, "version": parent.version}
            ),
            "dependencies": [
                {"groupId": dep.group_id, "artifactId": dep.artifact_id, "version": dep.version, "scope": dep.scope}
                for dep in self.dependencies
            ],
            "minLineCoverage": self.min_line_coverage,
            "minBranchCoverage": self.min_branch_coverage,
            "analysisExcludePattern": self.analysis_exclude_pattern,
            "allowedDependencyCoordinates": list(self.allowed_dependency_coordinates),
        }


def extract_project_metadata(pom: Element, source: str = "", names: MetadataNames | None = None) -> ProjectMetadata:
    """Extract the project metadata from a parsed POM.

    The extraction only depends on its arguments.

    Parameters
    ----------
    pom : Element
        The root element of the POM.
    source : str
        The name of the document, used in error messages.
    names : MetadataNames | None
        The names of the coverage properties and of the checkstyle and enforcer plugins.
        If None, the built-in names are used.

    Returns
    -------
    ProjectMetadata
        The extracted metadata.

    Raises
    ------
    MissingFieldError
        If the module does not declare its artifactId, or the parent block lacks a coordinate field.
    NumericParseError
        If a coverage property is declared but is not a number.
    """
    names = names or MetadataNames()
    identity = resolve_coordinate(pom, PROJECT_PATH, source, inheritable=True)

    parent_identity = None
    if find_node(pom, PARENT_PATH) is not None:
        parent_identity = resolve_coordinate(pom, PARENT_PATH, source)

    min_line_coverage = extract_coverage_threshold(pom, names.line_coverage_property, source)
    min_branch_coverage = extract_coverage_threshold(pom, names.branch_coverage_property, source)
    analysis_exclude_pattern = extract_checkstyle_excludes(pom, names.checkstyle_plugin)
    allowed_dependency_coordinates = extract_enforcer_includes(pom, names.enforcer_plugin)
    dependencies = extract_dependencies(pom)

    logger.debug(
        "Extracted metadata of %s from %s: %d dependencies, %d allowed dependencies.",
        identity,
        source or "<unknown>",
        len(dependencies),
        len(allowed_dependency_coordinates),
    )
    return ProjectMetadata(
        identity=identity,
        parent_identity=parent_identity,
        dependencies=dependencies,
        min_line_coverage=min_line_coverage,
        min_branch_coverage=min_branch_coverage,
        analysis_exclude_pattern=analysis_exclude_pattern,
        allowed_dependency_coordinates=allowed_dependency_coordinates,
        source=source,
    )


def read_project_metadata(
    stream: BinaryIO, source: str = "<stream>", names: MetadataNames | None = None
) -> ProjectMetadata:
    """Parse the POM read from a binary stream and extract its project metadata.

    Raises
    ------
    DocumentLoadError
        If the stream cannot be read or is not well-formed XML.
    """
    return extract_project_metadata(parse_pom_stream(stream, source), source, names)


def load_project_metadata(pom_path: str | os.PathLike[str], names: MetadataNames | None = None) -> ProjectMetadata:
    """Parse the POM file at the given path and extract its project metadata.

    Raises
    ------
    DocumentLoadError
        If the file cannot be read or is not well-formed XML.
    """
    return extract_project_metadata(parse_pom_file(pom_path), os.fspath(pom_path), names)
