# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module resolves the Maven coordinates (groupId, artifactId, version) declared in a POM."""

import logging
from dataclasses import dataclass
from xml.etree.ElementTree import Element  # nosec B405

from packageurl import PackageURL

from pommeta.errors import MissingFieldError
from pommeta.parsers.pom_query import find_text

logger: logging.Logger = logging.getLogger(__name__)

PROJECT_PATH = "/project"
PARENT_PATH = "/project/parent"


@dataclass(frozen=True)
class MavenCoordinate:
    """The groupId, artifactId and version identifying a Maven module.

    ``group_id`` and ``version`` are only ``None`` for the declared identity of a module that
    inherits them from its parent.
    """

    #: The groupId, e.g. ``com.azure``.
    group_id: str | None

    #: The artifactId, e.g. ``azure-core``.
    artifact_id: str

    #: The version, e.g. ``1.45.0``.
    version: str | None

    @property
    def purl(self) -> PackageURL:
        """Return the Maven PackageURL of this coordinate."""
        return PackageURL(type="maven", namespace=self.group_id, name=self.artifact_id, version=self.version)

    def __str__(self) -> str:
        return ":".join(part or "" for part in (self.group_id, self.artifact_id, self.version))


def _find_field(pom: Element, root_path: str, field: str) -> str | None:
    text = find_text(pom, f"{root_path}/{field}")
    if text is None or not text.strip():
        return None
    return text.strip()


def _require_field(pom: Element, root_path: str, field: str, source: str) -> str:
    value = _find_field(pom, root_path, field)
    if value is None:
        raise MissingFieldError(field, root_path, source)
    return value


def resolve_coordinate(pom: Element, root_path: str, source: str = "", inheritable: bool = False) -> MavenCoordinate:
    """Resolve the coordinate declared by the ``groupId``, ``artifactId`` and ``version`` children of ``root_path``.

    The caller is expected to check that ``root_path`` itself exists; a missing ``<parent>`` block
    is not an error for the POM as a whole.

    Parameters
    ----------
    pom : Element
        The root element of the POM.
    root_path : str
        The absolute path of the element holding the coordinate, e.g. ``/project/parent``.
    source : str
        The name of the document, used in error messages.
    inheritable : bool
        If True, ``groupId`` and ``version`` may be absent and resolve to None, since a module
        inherits them from its parent. The ``artifactId`` is always required.

    Returns
    -------
    MavenCoordinate
        The resolved coordinate. Values are stripped of surrounding whitespace.

    Raises
    ------
    MissingFieldError
        If a required field is absent or blank.
    """
    # The artifactId is resolved first so that a POM without its own identity fails on it.
    artifact_id = _require_field(pom, root_path, "artifactId", source)
    if inheritable:
        group_id = _find_field(pom, root_path, "groupId")
        version = _find_field(pom, root_path, "version")
        logger.debug("Declared coordinate at %s in %s: %s:%s:%s", root_path, source, group_id, artifact_id, version)
    else:
        group_id = _require_field(pom, root_path, "groupId", source)
        version = _require_field(pom, root_path, "version", source)

    return MavenCoordinate(group_id=group_id, artifact_id=artifact_id, version=version)
