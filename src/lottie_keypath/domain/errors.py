from __future__ import annotations

"""
Domain Exceptions.

Every failure surfaced by the KeyPath core derives from KeyPathError so the
interface layers can trap them with a single clause.
"""


class KeyPathError(Exception):
    """Base class for all KeyPath build failures."""


class MissingRootNameError(KeyPathError):
    """Raised when the root document carries no usable name."""

    def __init__(self, field_name: str = "nm"):
        super().__init__(f"No root key found (missing '{field_name}' on the document root)")
        self.field_name = field_name


class DuplicateAssetIdError(KeyPathError):
    """Raised under the strict policy when two assets share an identifier."""

    def __init__(self, asset_id: str):
        super().__init__(f"Duplicate asset identifier: '{asset_id}'")
        self.asset_id = asset_id


class InputDecodeError(KeyPathError):
    """Raised when the raw input cannot be decoded as JSON."""


class NoFileSelectedError(KeyPathError):
    """Raised by the GUI when a lookup is requested before choosing a file."""

    def __init__(self) -> None:
        super().__init__("No file selected.")
