# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module evaluates simple path queries against a parsed POM.

A path is a ``/`` separated list of element names, e.g. ``/project/parent/groupId``.

* A path starting with ``/`` is absolute: its first step must name the element the query is
  evaluated against, which is expected to be the document root.
* Any other path is relative to the element the query is evaluated against, e.g. ``groupId``
  evaluated against a ``dependency`` element.

Element names are matched regardless of their namespace, so POMs that declare the default
``http://maven.apache.org/POM/4.0.0`` namespace and POMs that declare none are queried alike.
"""

import re
from xml.etree.ElementTree import Element  # nosec B405

# Element names as they appear in POMs, including dotted property names such as ``jacoco.min.linecoverage``.
_STEP_PATTERN = re.compile(r"[A-Za-z_][\w.\-]*")


def local_name(tag: str) -> str:
    """Return the tag name without its ``{namespace}`` prefix."""
    return tag.rpartition("}")[2]


def _split_path(path: str) -> tuple[bool, list[str]]:
    absolute = path.startswith("/")
    steps = path.strip("/").split("/")
    for step in steps:
        if not _STEP_PATTERN.fullmatch(step):
            raise ValueError(f"Invalid step {step!r} in path {path!r}.")
    return absolute, steps


def find_nodes(node: Element, path: str) -> list[Element]:
    """Return all elements matching the path, in document order.

    Parameters
    ----------
    node : Element
        The element to evaluate the path against.
    path : str
        The absolute or relative path.

    Returns
    -------
    list[Element]
        The matching elements, or an empty list if there is no match.

    Raises
    ------
    ValueError
        If the path is empty or one of its steps is not a valid element name.
    """
    absolute, steps = _split_path(path)
    if absolute:
        if local_name(node.tag) != steps[0]:
            return []
        steps = steps[1:]
        if not steps:
            return [node]

    return node.findall("/".join(f"{{*}}{step}" for step in steps))


def find_node(node: Element, path: str) -> Element | None:
    """Return the first element matching the path, or None if there is none."""
    matches = find_nodes(node, path)
    return matches[0] if matches else None


def text_content(node: Element) -> str:
    """Return the concatenated text of the element and all its descendants."""
    return "".join(node.itertext())


def find_text(node: Element, path: str) -> str | None:
    """Return the text content of the first element matching the path.

    The text is returned verbatim, whitespace included. An element without text gives an empty string.

    Parameters
    ----------
    node : Element
        The element to evaluate the path against.
    path : str
        The absolute or relative path.

    Returns
    -------
    str | None
        The text content, or None if no element matches the path.
    """
    match = find_node(node, path)
    if match is None:
        return None
    return text_content(match)
