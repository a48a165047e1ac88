# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains error classes for pommeta."""


class PomMetadataError(Exception):
    """The base class for pommeta errors."""


class DocumentLoadError(PomMetadataError):
    """Happens when a POM document cannot be read or is not well-formed XML.

    The underlying exception is available through ``__cause__``.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load POM document {source}: {reason}")


class MissingFieldError(PomMetadataError):
    """Happens when a required coordinate field is absent from a POM."""

    def __init__(self, field: str, root_path: str, source: str = "") -> None:
        self.field = field
        self.root_path = root_path
        self.source = source
        location = f" in {source}" if source else ""
        super().__init__(f"Missing required field {root_path}/{field}{location}.")


class NumericParseError(PomMetadataError):
    """Happens when a numeric property is present but its text is not a number."""

    def __init__(self, field: str, text: str, source: str = "") -> None:
        self.field = field
        self.text = text
        self.source = source
        location = f" in {source}" if source else ""
        super().__init__(f"Value {text!r} of {field}{location} is not a valid number.")


class NoIdentityAvailableError(PomMetadataError):
    """Happens when an effective coordinate field is neither declared nor inherited from a parent."""

    def __init__(self, field: str, source: str = "") -> None:
        self.field = field
        self.source = source
        location = f" {source}" if source else ""
        super().__init__(f"The module{location} declares no {field} and has no parent to inherit it from.")
