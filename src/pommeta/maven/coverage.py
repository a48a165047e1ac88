# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module reads the minimum JaCoCo coverage ratios declared as POM properties."""

import logging
import math
import re
from xml.etree.ElementTree import Element  # nosec B405

from pommeta.errors import NumericParseError
from pommeta.parsers.pom_query import find_text

logger: logging.Logger = logging.getLogger(__name__)

LINE_COVERAGE_PROPERTY = "jacoco.min.linecoverage"
BRANCH_COVERAGE_PROPERTY = "jacoco.min.branchcoverage"

# Plain ASCII decimals with an optional exponent. Digit separators and non-ASCII digits are rejected.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def extract_coverage_threshold(pom: Element, property_name: str, source: str = "") -> float | None:
    """Return the value of the coverage property ``/project/properties/<property_name>``.

    Parameters
    ----------
    pom : Element
        The root element of the POM.
    property_name : str
        The name of the property, e.g. ``jacoco.min.linecoverage``.
    source : str
        The name of the document, used in error messages.

    Returns
    -------
    float | None
        The threshold, or None if the property is not declared.

    Raises
    ------
    NumericParseError
        If the property is declared but its value is not a finite number.
    """
    text = find_text(pom, f"/project/properties/{property_name}")
    if text is None:
        return None

    if not _DECIMAL_PATTERN.fullmatch(text.strip()):
        raise NumericParseError(property_name, text, source)

    value = float(text)
    # Exponents out of range overflow to infinity.
    if not math.isfinite(value):
        raise NumericParseError(property_name, text, source)

    logger.debug("Found %s = %s.", property_name, value)
    return value
