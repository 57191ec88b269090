"""Custom field name/value pairs."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List

from pydantic import ConfigDict, Field, ValidationError

from intacct.core.xml_utils import child_text, text_element
from intacct.models.base import IntacctBaseModel
from intacct.services.errors import MalformedResponseError


class IntacctCustomField(IntacctBaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    value: str = ""

    def to_xml_elements(self) -> List[ET.Element]:
        return [
            text_element("customfieldname", self.name),
            text_element("customfieldvalue", self.value),
        ]

    @classmethod
    def from_xml(cls, element: ET.Element) -> "IntacctCustomField":
        name = child_text(element, "customfieldname")
        if name is None:
            raise MalformedResponseError("Custom field without a name", element=element.tag)
        try:
            return cls(name=name, value=child_text(element, "customfieldvalue") or "")
        except ValidationError as exc:
            raise MalformedResponseError(str(exc), element=element.tag) from exc
