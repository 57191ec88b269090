"""
Intacct XML API client.

Typical flow:
    client = IntacctClient(IntacctClientConfig.from_env())
    session = await client.establish_session(credentials_from_env())
    response = await client.execute_operations([CreateGlTransactionOperation(session, transaction)])
"""
from intacct.core.config import IntacctClientConfig, credentials_from_env
from intacct.core.session import IntacctApiSession, IntacctSession, IntacctUserCredentials
from intacct.operations import CreateGlTransactionOperation, GetApiSessionOperation
from intacct.services.client import IntacctClient

__all__ = [
    "CreateGlTransactionOperation",
    "GetApiSessionOperation",
    "IntacctApiSession",
    "IntacctClient",
    "IntacctClientConfig",
    "IntacctSession",
    "IntacctUserCredentials",
    "credentials_from_env",
]
