# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the parser for POM files."""
import logging
import os
from typing import BinaryIO
from xml.etree.ElementTree import Element  # nosec B405

import defusedxml.ElementTree
from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring

from pommeta.errors import DocumentLoadError

logger: logging.Logger = logging.getLogger(__name__)


def parse_pom_bytes(pom_bytes: bytes, source: str = "<bytes>") -> Element:
    """
    Parse the passed POM content using defusedxml.

    The encoding declared in the XML prolog is honoured.

    Parameters
    ----------
    pom_bytes : bytes
        The raw contents of a POM file.
    source : str
        A name for the document, used in error messages.

    Returns
    -------
    Element
        The parsed element representing the POM's XML hierarchy.

    Raises
    ------
    DocumentLoadError
        If the content is not well-formed XML, uses forbidden XML constructs or an unsupported encoding.
    """
    try:
        # Stored here first to help with type checking.
        pom: Element = fromstring(pom_bytes)
        return pom
    except (DefusedXmlException, defusedxml.ElementTree.ParseError, ValueError, LookupError) as error:
        # expat raises ValueError or LookupError for encodings it cannot decode.
        logger.debug("Failed to parse XML from %s: %s", source, error)
        raise DocumentLoadError(source, str(error)) from error


def parse_pom_string(pom_string: str, source: str = "<string>") -> Element:
    """
    Parse the passed POM string using defusedxml.

    Parameters
    ----------
    pom_string : str
        The contents of a POM file as a string.
    source : str
        A name for the document, used in error messages.

    Returns
    -------
    Element
        The parsed element representing the POM's XML hierarchy.

    Raises
    ------
    DocumentLoadError
        If the content is not well-formed XML, uses forbidden XML constructs or an unsupported encoding.
    """
    try:
        pom: Element = fromstring(pom_string)
        return pom
    except (DefusedXmlException, defusedxml.ElementTree.ParseError, ValueError, LookupError) as error:
        # expat raises ValueError or LookupError for encodings it cannot decode.
        logger.debug("Failed to parse XML from %s: %s", source, error)
        raise DocumentLoadError(source, str(error)) from error


def parse_pom_stream(stream: BinaryIO, source: str = "<stream>") -> Element:
    """Read the whole stream and parse it as a POM.

    Raises
    ------
    DocumentLoadError
        If the stream cannot be read or its content cannot be parsed.
    """
    try:
        content = stream.read()
    except OSError as error:
        logger.debug("Failed to read %s: %s", source, error)
        raise DocumentLoadError(source, str(error)) from error

    if not isinstance(content, bytes):
        raise DocumentLoadError(source, "the stream must be opened in binary mode")

    return parse_pom_bytes(content, source)


def parse_pom_file(pom_path: str | os.PathLike[str]) -> Element:
    """Read and parse the POM file at the given path.

    Raises
    ------
    DocumentLoadError
        If the file cannot be read or its content cannot be parsed.
    """
    source = os.fspath(pom_path)
    try:
        with open(source, "rb") as file:
            return parse_pom_stream(file, source)
    except OSError as error:
        logger.debug("Failed to open %s: %s", source, error)
        raise DocumentLoadError(source, str(error)) from error
