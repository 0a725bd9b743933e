"""
Data model for IP lookup results.
"""

import json
from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass
class AddressInformation:
    """Metadata returned by the lookup service for a single address."""

    ip: str = ""
    city: str = ""
    region: str = ""
    country: str = ""
    log: str = ""
    org: str = ""
    postal: str = ""
    timezone: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "AddressInformation":
        """
        Build a record from a decoded JSON document.

        Keys are matched case-insensitively and unknown keys are ignored.
        Missing keys and nulls become empty strings.

        Args:
            data: Decoded JSON value

        Returns:
            Populated AddressInformation

        Raises:
            ValueError: If data is not an object or a known field is not a string
        """
        if not isinstance(data, dict):
            raise ValueError(f"cannot decode {type(data).__name__} into AddressInformation")

        lowered: Dict[str, Any] = {}
        for key, value in data.items():
            lowered[str(key).lower()] = value

        values = {}
        for field in fields(cls):
            value = lowered.get(field.name)
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise ValueError(
                    f"cannot decode {type(value).__name__} into field AddressInformation.{field.name}"
                )
            values[field.name] = value

        return cls(**values)

    @classmethod
    def from_text(cls, body: str) -> "AddressInformation":
        """
        Decode a JSON response body into a record.

        Raises:
            ValueError: On malformed JSON or an incompatible document
        """
        return cls.from_json(json.loads(body))
