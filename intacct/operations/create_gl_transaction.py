"""Create a journal transaction in any journal except statistical ones.

Usage:
    transaction = IntacctGeneralLedgerTransaction(
        journal_id=JOURNAL_ID_GENERAL_JOURNAL,
        date_created=IntacctDate.of(2024, 3, 31),
        description="Quarter-end reclass",
    )
    transaction.add_entry_pair(Decimal("100.00"), "6000", "Reclass", "SRC", "D100", "TGT", "D200")
    response = await client.execute_operations([CreateGlTransactionOperation(session, transaction)])

Success means ``response.success`` and no errors on the operation result.
Intacct answers PL05000053 when debits and credits do not balance.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Optional, Sequence

from intacct.core.session import IntacctSession
from intacct.core.xml_utils import serialize_child, serialize_children, serialize_string
from intacct.models.custom_fields import IntacctCustomField
from intacct.models.dates import IntacctDate
from intacct.models.gl_transactions import IntacctGeneralLedgerTransaction
from intacct.models.results import IntacctOperationResult
from intacct.operations.base import IntacctOperationBase
from intacct.services.errors import InvalidArgumentError


class CreateGlTransactionOperation(IntacctOperationBase[IntacctGeneralLedgerTransaction]):
    def __init__(
        self,
        session: IntacctSession,
        transaction: IntacctGeneralLedgerTransaction,
        reference_no: Optional[str] = None,
        source_entity: Optional[str] = None,
        custom_fields: Optional[Sequence[IntacctCustomField]] = None,
        reverse_date: Optional[IntacctDate] = None,
    ):
        super().__init__(session, "create_gltransaction", "key")
        if transaction is None:
            raise InvalidArgumentError("transaction")

        self._transaction = transaction.model_copy(deep=True)
        self._reverse_date = reverse_date
        self._reference_no = reference_no
        self._source_entity = source_entity
        self._custom_fields = tuple(custom_fields) if custom_fields is not None else None

    @property
    def transaction(self) -> IntacctGeneralLedgerTransaction:
        return self._transaction.model_copy(deep=True)

    @property
    def reverse_date(self) -> Optional[IntacctDate]:
        return self._reverse_date

    @property
    def reference_no(self) -> Optional[str]:
        return self._reference_no

    @property
    def source_entity(self) -> Optional[str]:
        return self._source_entity

    @property
    def custom_fields(self) -> Optional[Sequence[IntacctCustomField]]:
        return self._custom_fields

    def create_function_contents(self) -> List[ET.Element]:
        elements = self._transaction.to_xml_elements()
        serialize_child(self._reverse_date, "reversedate", elements)
        serialize_string(self._reference_no, "referenceno", elements)
        serialize_string(self._source_entity, "sourceentity", elements)
        serialize_children(self._custom_fields, "customfields", "customfield", elements)
        return elements

    def process_response_data(self, response_data: ET.Element) -> IntacctOperationResult[IntacctGeneralLedgerTransaction]:
        transaction = IntacctGeneralLedgerTransaction.from_xml(response_data)
        return IntacctOperationResult[IntacctGeneralLedgerTransaction](value=transaction)
