"""Intacct XML gateway client.

Builds the request envelope around one or more operations, posts it over
HTTPS and routes each ``<result>`` back to the operation that produced it.
Business errors stay in the returned results; only transport and parsing
problems raise.
"""
from __future__ import annotations

import time
import uuid
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Sequence

import httpx

from intacct.core.config import IntacctClientConfig
from intacct.core.session import IntacctApiSession, IntacctSession
from intacct.core.xml_utils import child_text, parse_bytes, text_element, to_bytes, wrap
from intacct.models.results import IntacctOperationResult, IntacctResponse, IntacctServiceError
from intacct.operations.base import STATUS_SUCCESS, IntacctOperationBase
from intacct.operations.get_api_session import GetApiSessionOperation
from intacct.services.errors import (
    AuthenticationError,
    InvalidArgumentError,
    MalformedResponseError,
    TransportError,
)
from intacct.services.logging import log_error, log_request, logger

CONTENT_TYPE = "x-intacct-xml-request"


class IntacctClient:
    """
    Async client for the Intacct XML gateway.

    Args:
        config: sender credentials and HTTP settings
        transport: optional httpx transport (tests pass ``httpx.MockTransport``)
    """

    def __init__(
        self,
        config: IntacctClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if config is None:
            raise InvalidArgumentError("config")
        self.config = config
        self._transport = transport

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    async def execute_operations(
        self,
        operations: Sequence[IntacctOperationBase],
        transaction: bool = False,
    ) -> IntacctResponse:
        """Send all operations in one request; they must share a session."""
        request = self.build_request(operations, transaction=transaction)
        endpoint = operations[0].session.endpoint_url
        body = await self._post(
            endpoint,
            to_bytes(request),
            control_id=request.findtext("control/controlid"),
            functions=len(operations),
        )
        return self.parse_response(operations, body)

    async def establish_session(self, credentials: IntacctSession) -> IntacctApiSession:
        """Trade a company login for an API session id."""
        operation = GetApiSessionOperation(credentials)
        response = await self.execute_operations([operation])
        errors = list(response.errors)
        if response.operation_results:
            errors.extend(response.operation_results[0].errors)
        if not response.success or errors:
            log_error(
                "authentication_failed",
                "Intacct rejected the session request",
                context={"error_numbers": [e.error_no for e in errors]},
            )
            raise AuthenticationError(errors)
        return response.operation_results[0].value

    # ------------------------------------------------------------------ #
    # Envelope
    # ------------------------------------------------------------------ #
    def build_request(
        self,
        operations: Sequence[IntacctOperationBase],
        transaction: bool = False,
    ) -> ET.Element:
        if not operations:
            raise InvalidArgumentError("operations", "At least one operation is required")
        session = operations[0].session
        if any(op.session != session for op in operations[1:]):
            raise InvalidArgumentError("operations", "All operations in a request must share one session")

        control = wrap(
            "control",
            [
                text_element("senderid", self.config.sender_id),
                text_element("password", self.config.sender_password),
                text_element("controlid", uuid.uuid4().hex),
                text_element("uniqueid", False),
                text_element("dtdversion", self.config.dtd_version),
                text_element("includewhitespace", False),
            ],
        )
        operation = wrap(
            "operation",
            [
                wrap("authentication", session.authentication_elements()),
                wrap("content", [op.to_xml() for op in operations]),
            ],
            transaction="true" if transaction else "false",
        )
        return wrap("request", [control, operation])

    # ------------------------------------------------------------------ #
    # Response
    # ------------------------------------------------------------------ #
    def parse_response(
        self,
        operations: Sequence[IntacctOperationBase],
        body: bytes | str,
    ) -> IntacctResponse:
        root = parse_bytes(body)
        if root.tag != "response":
            raise MalformedResponseError(f"Expected <response>, got <{root.tag}>", element=root.tag)

        control_id = child_text(root, "control/controlid")
        if not _is_success(child_text(root, "control/status")):
            return IntacctResponse(
                success=False,
                control_id=control_id,
                errors=IntacctServiceError.list_from_xml(root),
            )

        operation = root.find("operation")
        if operation is None:
            raise MalformedResponseError("Response has no <operation>", element="operation")

        if not _is_success(child_text(operation, "authentication/status")):
            errors = IntacctServiceError.list_from_xml(operation) or IntacctServiceError.list_from_xml(root)
            return IntacctResponse(success=False, control_id=control_id, errors=errors)

        results_by_id: Dict[str, ET.Element] = {}
        for result in operation.findall("result"):
            result_control_id = child_text(result, "controlid")
            if result_control_id:
                results_by_id[result_control_id] = result

        operation_results: List[IntacctOperationResult] = []
        for op in operations:
            result = results_by_id.get(op.control_id)
            if result is None:
                logger.warning("No result returned for %s", op)
                operation_results.append(
                    IntacctOperationResult(
                        errors=[IntacctServiceError(description=f"No result returned for {op.function_name}")],
                        control_id=op.control_id,
                    )
                )
                continue
            operation_results.append(op.process_response(result))

        return IntacctResponse(success=True, control_id=control_id, operation_results=operation_results)

    # ------------------------------------------------------------------ #
    # Transport
    # ------------------------------------------------------------------ #
    async def _post(self, endpoint: str, payload: bytes, control_id: Optional[str] = None, **fields) -> bytes:
        started = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout, transport=self._transport) as client:
                response = await client.post(endpoint, content=payload, headers={"Content-Type": CONTENT_TYPE})
        except httpx.HTTPError as exc:
            log_error("transport_failed", f"Intacct gateway unreachable: {endpoint}", exception=exc)
            raise TransportError(endpoint, str(exc)) from exc

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        log_request("POST", endpoint, response.status_code, duration_ms, control_id=control_id, **fields)

        if response.is_error:
            log_error(
                "transport_failed",
                f"Intacct gateway answered {response.status_code}",
                context={"endpoint": endpoint, "status_code": response.status_code},
            )
            raise TransportError(endpoint, response.text[:500], status_code=response.status_code)
        return response.content


def _is_success(status: Optional[str]) -> bool:
    return (status or "").lower() == STATUS_SUCCESS
