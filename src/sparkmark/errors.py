"""Exception classes for sparkmark.

The render pipeline is total and never raises for string input; these
exceptions cover the surfaces around it (configuration, serialization).
"""

from __future__ import annotations


class SparkmarkError(Exception):
    """Base exception for all sparkmark errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(SparkmarkError, TypeError):
    """Invalid render configuration value.

    Raised when a config field receives a value of the wrong type,
    e.g. a string where a flag is expected.
    """

    def __init__(self, field_name: str, value: object) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending RenderConfig field
            value: The rejected value
        """
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Config field '{field_name}' expects bool, got {type(value).__name__}"
        )


class SerializationError(SparkmarkError, ValueError):
    """Error reconstructing a node tree from serialized data.

    Raised for a missing or unknown ``_type`` discriminator, or when
    the decoded root is not the expected node type.
    """

    pass
