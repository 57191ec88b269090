"""Intacct date values (``<year>/<month>/<day>`` blocks)."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date, datetime
from typing import List

from pydantic import ConfigDict

from intacct.core.xml_utils import child_text, text_element
from intacct.models.base import IntacctBaseModel
from intacct.services.errors import MalformedResponseError

# Text forms the gateway uses when a date comes back as a single value.
_TEXT_FORMATS = ("%m/%d/%Y", "%Y-%m-%d")


class IntacctDate(IntacctBaseModel):
    model_config = ConfigDict(frozen=True)

    value: date

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "IntacctDate":
        return cls(value=date(year, month, day))

    def to_xml_elements(self) -> List[ET.Element]:
        return [
            text_element("year", self.value.year),
            text_element("month", f"{self.value.month:02d}"),
            text_element("day", f"{self.value.day:02d}"),
        ]

    @classmethod
    def from_xml(cls, element: ET.Element) -> "IntacctDate":
        year = child_text(element, "year")
        if year is not None:
            month = child_text(element, "month")
            day = child_text(element, "day")
            try:
                return cls.of(int(year), int(month or ""), int(day or ""))
            except ValueError as exc:
                raise MalformedResponseError(str(exc), element=element.tag) from exc

        raw = (element.text or "").strip()
        for fmt in _TEXT_FORMATS:
            try:
                return cls(value=datetime.strptime(raw, fmt).date())
            except ValueError:
                continue
        raise MalformedResponseError(f"Unrecognized date: {raw!r}", element=element.tag)
