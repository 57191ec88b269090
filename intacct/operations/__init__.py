from intacct.operations.base import IntacctOperationBase
from intacct.operations.create_gl_transaction import CreateGlTransactionOperation
from intacct.operations.get_api_session import GetApiSessionOperation

__all__ = [
    "CreateGlTransactionOperation",
    "GetApiSessionOperation",
    "IntacctOperationBase",
]
