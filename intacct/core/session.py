"""Authentication contexts for gateway calls."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from abc import abstractmethod
from typing import List, Optional

from pydantic import ConfigDict, Field, SecretStr

from intacct.core.xml_utils import serialize_string, text_element, wrap
from intacct.models.base import IntacctBaseModel

DEFAULT_ENDPOINT_URL = "https://api.intacct.com/ia/xml/xmlgw.phtml"


class IntacctSession(IntacctBaseModel):
    """
    Anything that can fill the ``<authentication>`` block of a request.

    Operations executed in the same request must share one session.
    """

    model_config = ConfigDict(frozen=True)

    endpoint_url: str = Field(default=DEFAULT_ENDPOINT_URL, min_length=1)

    @abstractmethod
    def authentication_elements(self) -> List[ET.Element]:
        """Children of the request's ``<authentication>`` element."""


class IntacctApiSession(IntacctSession):
    """An API session id obtained from getAPISession."""

    session_id: SecretStr

    def authentication_elements(self) -> List[ET.Element]:
        return [text_element("sessionid", self.session_id.get_secret_value())]


class IntacctUserCredentials(IntacctSession):
    """Company login; used to open an API session."""

    company_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    password: SecretStr
    entity_id: Optional[str] = None

    def authentication_elements(self) -> List[ET.Element]:
        login = [
            text_element("userid", self.user_id),
            text_element("companyid", self.company_id),
            text_element("password", self.password.get_secret_value()),
        ]
        serialize_string(self.entity_id, "locationid", login)
        return [wrap("login", login)]
