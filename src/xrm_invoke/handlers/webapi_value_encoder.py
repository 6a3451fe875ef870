# SPDX-License-Identifier: MIT
# Copyright (c) 2025 xrm-invoke contributors
"""Value encoding for the Dataverse Web API.

Actions receive their parameters as a JSON body; Functions receive them as
OData parameter aliases in the query string. Entity-shaped values are
encoded differently in each case:

    Action body:      {"@odata.type": "Microsoft.Dynamics.CRM.account",
                       "accountid": "<id>"}
    Function alias:   {"@odata.id": "accounts(<id>)"}

Action bodies are serialized with msgspec so Decimal values keep every
digit; function literals write them in fixed-point notation.

Entity set names are never discovered from the server. They come from the
configured overrides, falling back to ``<logical name>s``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal

import msgspec

from xrm_invoke.enums import EnumParameterType, EnumStructuralProperty
from xrm_invoke.models import ModelParameterTypeEntry
from xrm_invoke.runtime.validator_request_parameter import read_entity_fields
from xrm_invoke.utils.util_datetime import to_wire_datetime
from xrm_invoke.utils.util_guid import normalize_guid

CRM_NAMESPACE = "Microsoft.Dynamics.CRM"

# Keys that address the record; anything else on an Entity mapping is a column.
_RECORD_KEYS = frozenset({"id", "entityType"})

# "name" is the display label of an EntityReference but a column of an Entity.
_REFERENCE_LABEL_KEYS = _RECORD_KEYS | {"name"}

# Decimal values are written as their exact text, never rounded through float.
_BODY_ENCODER = msgspec.json.Encoder(decimal_format="number")


class WebApiValueEncoder:
    """Encodes request values for action bodies and function aliases."""

    def __init__(self, entity_set_names: Mapping[str, str] | None = None) -> None:
        self._entity_set_names = dict(entity_set_names or {})

    def entity_set_name(self, logical_name: str) -> str:
        return self._entity_set_names.get(logical_name, f"{logical_name}s")

    def record_path(self, entity: object) -> str:
        """Return ``<entityset>(<id>)`` for an entity reference.

        Braces are stripped and the id lower-cased for the URL only; the
        request values keep the id as the caller supplied it.
        """
        fields = read_entity_fields(entity)
        if fields is None:
            raise ValueError("bound entity must expose 'id' and 'entityType'")
        record_id, entity_type = fields
        return f"{self.entity_set_name(str(entity_type))}({normalize_guid(str(record_id))})"

    # Action bodies

    def encode_body_value(
        self, name: str, entry: ModelParameterTypeEntry, value: object
    ) -> object:
        if entry.structural_property is EnumStructuralProperty.ENTITY:
            skip = (
                _REFERENCE_LABEL_KEYS
                if entry.parameter_type is EnumParameterType.ENTITY_REFERENCE
                else _RECORD_KEYS
            )
            return self._encode_entity_object(value, skip)
        if entry.structural_property is EnumStructuralProperty.COLLECTION:
            return [
                self._encode_entity_object(element, _RECORD_KEYS)
                for element in value  # type: ignore[attr-defined]
            ]
        return self._encode_primitive(name, value)

    def dump_body(self, body: Mapping[str, object]) -> bytes:
        """Serialize an encoded action body to JSON bytes."""
        return _BODY_ENCODER.encode(body)

    def _encode_entity_object(
        self, value: object, skip_keys: frozenset[str]
    ) -> dict[str, object]:
        """Encode one record.

        A record without an id (empty or None) is sent without the
        ``<type>id`` key so the server creates it.
        """
        fields = read_entity_fields(value)
        if fields is None:
            raise ValueError("entity value must expose 'id' and 'entityType'")
        record_id, entity_type = fields
        encoded: dict[str, object] = {"@odata.type": f"{CRM_NAMESPACE}.{entity_type}"}
        if record_id is not None and record_id != "":
            encoded[f"{entity_type}id"] = record_id
        if isinstance(value, Mapping):
            for key, column_value in value.items():
                if key not in skip_keys:
                    encoded[key] = self._encode_primitive(str(key), column_value)
        return encoded

    def _encode_primitive(self, name: str, value: object) -> object:
        if isinstance(value, datetime):
            return to_wire_datetime(value, context=name)
        return value

    # Function aliases

    def encode_function_literal(
        self, name: str, entry: ModelParameterTypeEntry, value: object
    ) -> str:
        """Encode ``value`` as an OData literal for a ``@name`` alias."""
        if entry.structural_property is EnumStructuralProperty.ENTITY:
            return json.dumps({"@odata.id": self.record_path(value)})
        if entry.structural_property is EnumStructuralProperty.COLLECTION:
            return json.dumps(
                [{"@odata.id": self.record_path(element)} for element in value]  # type: ignore[attr-defined]
            )
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Decimal):
            return format(value, "f")
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, datetime):
            return to_wire_datetime(value, context=name)
        text = str(value).replace("'", "''")
        return f"'{text}'"


__all__: list[str] = ["CRM_NAMESPACE", "WebApiValueEncoder"]
