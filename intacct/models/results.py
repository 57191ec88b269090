"""Operation results and gateway error descriptors."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from intacct.core.xml_utils import child_text
from intacct.models.base import IntacctBaseModel

T = TypeVar("T")


class IntacctServiceError(IntacctBaseModel):
    error_no: Optional[str] = None
    description: Optional[str] = None
    description2: Optional[str] = None
    correction: Optional[str] = None

    @classmethod
    def from_xml(cls, element: ET.Element) -> "IntacctServiceError":
        return cls(
            error_no=child_text(element, "errorno"),
            description=child_text(element, "description"),
            description2=child_text(element, "description2"),
            correction=child_text(element, "correction"),
        )

    @classmethod
    def list_from_xml(cls, parent: Optional[ET.Element]) -> List["IntacctServiceError"]:
        """Collect every ``errormessage/error`` block under ``parent``."""
        if parent is None:
            return []
        return [cls.from_xml(error) for error in parent.findall("errormessage/error")]


class IntacctOperationResult(IntacctBaseModel, Generic[T]):
    """Outcome of one function call: a value on success, errors otherwise."""

    value: Optional[T] = None
    errors: List[IntacctServiceError] = Field(default_factory=list)
    control_id: Optional[str] = None

    @property
    def success(self) -> bool:
        return not self.errors


class IntacctResponse(IntacctBaseModel):
    """Whole-request outcome; ``success`` covers the control and authentication blocks only."""

    success: bool
    control_id: Optional[str] = None
    errors: List[IntacctServiceError] = Field(default_factory=list)
    operation_results: List[IntacctOperationResult] = Field(default_factory=list)
