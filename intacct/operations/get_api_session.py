"""Open an API session from a company login."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List

from intacct.core.session import IntacctApiSession, IntacctSession
from intacct.core.xml_utils import child_text
from intacct.models.results import IntacctOperationResult
from intacct.operations.base import IntacctOperationBase
from intacct.services.errors import MalformedResponseError


class GetApiSessionOperation(IntacctOperationBase[IntacctApiSession]):
    def __init__(self, session: IntacctSession):
        super().__init__(session, "getAPISession", "data/api")

    def create_function_contents(self) -> List[ET.Element]:
        return []

    def process_response_data(self, response_data: ET.Element) -> IntacctOperationResult[IntacctApiSession]:
        session_id = child_text(response_data, "sessionid")
        if session_id is None:
            raise MalformedResponseError("getAPISession returned no session id", element="sessionid")
        api_session = IntacctApiSession(
            session_id=session_id,
            endpoint_url=child_text(response_data, "endpoint") or self.session.endpoint_url,
        )
        return IntacctOperationResult[IntacctApiSession](value=api_session)
