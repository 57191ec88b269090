from __future__ import annotations

import xml.etree.ElementTree as ET
from decimal import Decimal
from typing import List

from intacct.core.session import IntacctApiSession
from intacct.models import (
    JOURNAL_ID_GENERAL_JOURNAL,
    IntacctDate,
    IntacctGeneralLedgerTransaction,
)

ENDPOINT = "https://gateway.example.com/ia/xml/xmlgw.phtml"


def make_session(session_id: str = "sess-123") -> IntacctApiSession:
    return IntacctApiSession(session_id=session_id, endpoint_url=ENDPOINT)


def make_transaction() -> IntacctGeneralLedgerTransaction:
    transaction = IntacctGeneralLedgerTransaction(
        journal_id=JOURNAL_ID_GENERAL_JOURNAL,
        date_created=IntacctDate.of(2024, 3, 31),
        description="Quarter-end reclass",
    )
    transaction.add_entry_pair(Decimal("100.00"), "6000", "Reclass hosting", "OPS", "D100", "RND", "D200")
    return transaction


def tags(elements: List[ET.Element]) -> List[str]:
    return [element.tag for element in elements]
