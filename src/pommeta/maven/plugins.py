# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module reads the configuration of build plugins declared in a POM."""

import logging
from xml.etree.ElementTree import Element  # nosec B405

from pommeta.parsers.pom_query import find_nodes, find_text, text_content

logger: logging.Logger = logging.getLogger(__name__)

PLUGIN_PATH = "/project/build/plugins/plugin"
CHECKSTYLE_PLUGIN = "maven-checkstyle-plugin"
ENFORCER_PLUGIN = "maven-enforcer-plugin"


def find_plugin(pom: Element, artifact_id: str) -> Element | None:
    """Find the build plugin with the given artifactId.

    Plugins are identified by the text of their ``artifactId`` child, not by their position.
    If several plugins share the artifactId, the first one declared is returned.

    Parameters
    ----------
    pom : Element
        The root element of the POM.
    artifact_id : str
        The artifactId of the plugin, e.g. ``maven-enforcer-plugin``.

    Returns
    -------
    Element | None
        The ``<plugin>`` element, or None if no plugin has that artifactId.
    """
    for plugin in find_nodes(pom, PLUGIN_PATH):
        if find_text(plugin, "artifactId") == artifact_id:
            return plugin

    logger.debug("No plugin with artifactId %s.", artifact_id)
    return None


def extract_checkstyle_excludes(pom: Element, plugin_name: str = CHECKSTYLE_PLUGIN) -> str | None:
    """Return the ``configuration/excludes`` text of the checkstyle plugin.

    The text is returned as written in the POM, surrounding whitespace included.
    """
    plugin = find_plugin(pom, plugin_name)
    if plugin is None:
        return None
    return find_text(plugin, "configuration/excludes")


def extract_enforcer_includes(pom: Element, plugin_name: str = ENFORCER_PLUGIN) -> tuple[str, ...]:
    """Return the dependencies allowed by the ``bannedDependencies`` rule of the enforcer plugin.

    Parameters
    ----------
    pom : Element
        The root element of the POM.
    plugin_name : str
        The artifactId of the enforcer plugin.

    Returns
    -------
    tuple[str, ...]
        The stripped text of every ``configuration/rules/bannedDependencies/includes/include``,
        in document order. Empty if the plugin or the rule is absent.
    """
    plugin = find_plugin(pom, plugin_name)
    if plugin is None:
        return ()
    includes = find_nodes(plugin, "configuration/rules/bannedDependencies/includes/include")
    return tuple(text_content(include).strip() for include in includes)
