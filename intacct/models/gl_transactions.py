"""General-ledger journal transactions and their entries."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import Field, ValidationError

from intacct.core.xml_utils import (
    child_decimal,
    child_text,
    serialize_child,
    serialize_children,
    serialize_string,
    text_element,
)
from intacct.models.base import IntacctBaseModel
from intacct.models.dates import IntacctDate
from intacct.services.errors import MalformedResponseError

JOURNAL_ID_GENERAL_JOURNAL = "GJ"
JOURNAL_ID_ADJUSTING_JOURNAL = "ADJ"

TR_TYPE_DEBIT = "debit"
TR_TYPE_CREDIT = "credit"


class IntacctGeneralLedgerEntry(IntacctBaseModel):
    """One debit or credit line of a journal transaction."""

    tr_type: Literal["debit", "credit"]
    amount: Decimal = Field(..., gt=0)
    account_no: str = Field(..., min_length=1)
    date_created: Optional[IntacctDate] = None
    memo: Optional[str] = None
    location_id: Optional[str] = None
    department_id: Optional[str] = None  # cost center
    class_id: Optional[str] = None

    def to_xml_elements(self) -> List[ET.Element]:
        elements = [
            text_element("trtype", self.tr_type),
            text_element("amount", self.amount),
            text_element("glaccountno", self.account_no),
        ]
        serialize_child(self.date_created, "datecreated", elements)
        serialize_string(self.memo, "memo", elements)
        serialize_string(self.location_id, "locationid", elements)
        serialize_string(self.department_id, "departmentid", elements)
        serialize_string(self.class_id, "classid", elements)
        return elements

    @classmethod
    def from_xml(cls, element: ET.Element) -> "IntacctGeneralLedgerEntry":
        tr_type = child_text(element, "trtype")
        amount = child_decimal(element, "amount")
        account_no = child_text(element, "glaccountno")
        if tr_type is None or amount is None or account_no is None:
            raise MalformedResponseError(
                "GL entry requires trtype, amount and glaccountno", element=element.tag
            )
        date_element = element.find("datecreated")
        date_created = IntacctDate.from_xml(date_element) if date_element is not None else None
        try:
            return cls(
                tr_type=tr_type.lower(),
                amount=amount,
                account_no=account_no,
                date_created=date_created,
                memo=child_text(element, "memo"),
                location_id=child_text(element, "locationid"),
                department_id=child_text(element, "departmentid"),
                class_id=child_text(element, "classid"),
            )
        except ValidationError as exc:
            raise MalformedResponseError(str(exc), element=element.tag) from exc


class IntacctGeneralLedgerTransaction(IntacctBaseModel):
    """
    A journal transaction: a group of entries posted together.

    Debits must equal credits; Intacct rejects unbalanced transactions with
    PL05000053, so the totals here are informational only.

    A transaction read back from a create response usually carries nothing
    but ``record_no``.
    """

    journal_id: Optional[str] = None
    date_created: Optional[IntacctDate] = None
    description: Optional[str] = None
    entries: List[IntacctGeneralLedgerEntry] = Field(default_factory=list)
    record_no: Optional[str] = None

    def add_entry(self, entry: IntacctGeneralLedgerEntry) -> None:
        self.entries.append(entry)

    def add_entry_pair(
        self,
        amount: Decimal,
        account_no: str,
        memo: Optional[str],
        source_class_id: Optional[str],
        source_department_id: Optional[str],
        target_class_id: Optional[str],
        target_department_id: Optional[str],
    ) -> None:
        """
        Move ``amount`` on one account from a source class/cost center to a
        target class/cost center: credit the source, debit the target.
        """
        self.add_entry(
            IntacctGeneralLedgerEntry(
                tr_type=TR_TYPE_CREDIT,
                amount=amount,
                account_no=account_no,
                date_created=self.date_created,
                memo=memo,
                class_id=source_class_id,
                department_id=source_department_id,
            )
        )
        self.add_entry(
            IntacctGeneralLedgerEntry(
                tr_type=TR_TYPE_DEBIT,
                amount=amount,
                account_no=account_no,
                date_created=self.date_created,
                memo=memo,
                class_id=target_class_id,
                department_id=target_department_id,
            )
        )

    @property
    def total_debits(self) -> Decimal:
        return sum((e.amount for e in self.entries if e.tr_type == TR_TYPE_DEBIT), Decimal("0"))

    @property
    def total_credits(self) -> Decimal:
        return sum((e.amount for e in self.entries if e.tr_type == TR_TYPE_CREDIT), Decimal("0"))

    @property
    def is_balanced(self) -> bool:
        return self.total_debits == self.total_credits

    def to_xml_elements(self) -> List[ET.Element]:
        elements: List[ET.Element] = []
        serialize_string(self.journal_id, "journalid", elements)
        serialize_child(self.date_created, "datecreated", elements)
        serialize_string(self.description, "description", elements)
        serialize_children(self.entries, "gltransactionentries", "glentry", elements)
        return elements

    @classmethod
    def from_xml(cls, element: ET.Element) -> "IntacctGeneralLedgerTransaction":
        if element.tag == "key":
            return cls(record_no=(element.text or "").strip() or None)

        date_element = element.find("datecreated")
        return cls(
            record_no=child_text(element, "recordno") or child_text(element, "key"),
            journal_id=child_text(element, "journalid"),
            date_created=IntacctDate.from_xml(date_element) if date_element is not None else None,
            description=child_text(element, "description"),
            entries=[
                IntacctGeneralLedgerEntry.from_xml(entry)
                for entry in element.findall("gltransactionentries/glentry")
            ],
        )
