from intacct.models.base import IntacctBaseModel
from intacct.models.custom_fields import IntacctCustomField
from intacct.models.dates import IntacctDate
from intacct.models.gl_transactions import (
    JOURNAL_ID_ADJUSTING_JOURNAL,
    JOURNAL_ID_GENERAL_JOURNAL,
    IntacctGeneralLedgerEntry,
    IntacctGeneralLedgerTransaction,
)
from intacct.models.results import IntacctOperationResult, IntacctResponse, IntacctServiceError

__all__ = [
    "IntacctBaseModel",
    "IntacctCustomField",
    "IntacctDate",
    "IntacctGeneralLedgerEntry",
    "IntacctGeneralLedgerTransaction",
    "IntacctOperationResult",
    "IntacctResponse",
    "IntacctServiceError",
    "JOURNAL_ID_ADJUSTING_JOURNAL",
    "JOURNAL_ID_GENERAL_JOURNAL",
]
