"""Base class for gateway functions.

An operation knows how to render its ``<function>`` block and how to turn
the matching ``<result>`` block back into a typed value. Transport, the
request envelope and result routing live in the client.
"""
from __future__ import annotations

import uuid
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from intacct.core.session import IntacctSession
from intacct.core.xml_utils import child_text, wrap
from intacct.models.results import IntacctOperationResult, IntacctServiceError
from intacct.services.errors import InvalidArgumentError, MalformedResponseError

T = TypeVar("T")

STATUS_SUCCESS = "success"


class IntacctOperationBase(ABC, Generic[T]):
    """
    Args:
        session: authentication context for the request
        function_name: Intacct function element, e.g. ``create_gltransaction``
        response_element: path of the data element inside ``<result>``
    """

    def __init__(self, session: IntacctSession, function_name: str, response_element: str):
        if session is None:
            raise InvalidArgumentError("session")
        if not function_name:
            raise InvalidArgumentError("function_name")

        self._session = session
        self._function_name = function_name
        self._response_element = response_element
        self._control_id = uuid.uuid4().hex

    @property
    def session(self) -> IntacctSession:
        return self._session

    @property
    def function_name(self) -> str:
        return self._function_name

    @property
    def control_id(self) -> str:
        return self._control_id

    @abstractmethod
    def create_function_contents(self) -> List[ET.Element]:
        """Ordered children of the function element."""

    @abstractmethod
    def process_response_data(self, response_data: ET.Element) -> IntacctOperationResult[T]:
        """Build the success result from the response data element."""

    def to_xml(self) -> ET.Element:
        function = wrap(self._function_name, self.create_function_contents())
        return wrap("function", [function], controlid=self._control_id)

    def process_response(self, result: ET.Element) -> IntacctOperationResult[T]:
        status = (child_text(result, "status") or "").lower()
        if status != STATUS_SUCCESS:
            errors = IntacctServiceError.list_from_xml(result)
            if not errors:
                errors = [IntacctServiceError(description=f"{self._function_name} returned status {status or 'unknown'}")]
            return IntacctOperationResult(errors=errors, control_id=self._control_id)

        response_data = result.find(self._response_element)
        if response_data is None:
            raise MalformedResponseError(
                f"{self._function_name} result has no <{self._response_element}>",
                element=self._response_element,
            )
        outcome = self.process_response_data(response_data)
        outcome.control_id = self._control_id
        return outcome

    def __repr__(self) -> str:
        return f"{type(self).__name__}(function={self._function_name!r}, control_id={self._control_id!r})"
