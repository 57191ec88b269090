import xml.etree.ElementTree as ET
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from helpers import make_session, make_transaction, tags
from intacct.core.xml_utils import wrap
from intacct.models import IntacctCustomField, IntacctDate, IntacctGeneralLedgerTransaction
from intacct.operations import CreateGlTransactionOperation
from intacct.services.errors import InvalidArgumentError, MalformedResponseError

TRANSACTION_TAGS = ["journalid", "datecreated", "description", "gltransactionentries"]


def _full_operation() -> CreateGlTransactionOperation:
    return CreateGlTransactionOperation(
        make_session(),
        make_transaction(),
        reference_no="REF-1",
        source_entity="US-EAST",
        custom_fields=[IntacctCustomField(name="A", value="1"), IntacctCustomField(name="B", value="2")],
        reverse_date=IntacctDate.of(2024, 4, 1),
    )


def test_rejects_missing_session():
    with pytest.raises(InvalidArgumentError) as excinfo:
        CreateGlTransactionOperation(None, make_transaction())
    assert excinfo.value.context == {"argument": "session"}


def test_rejects_missing_transaction():
    with pytest.raises(InvalidArgumentError) as excinfo:
        CreateGlTransactionOperation(make_session(), None)
    assert excinfo.value.context == {"argument": "transaction"}
    assert isinstance(excinfo.value, ValueError)


def test_optional_fields_omitted():
    operation = CreateGlTransactionOperation(make_session(), make_transaction())
    assert tags(operation.create_function_contents()) == TRANSACTION_TAGS


def test_empty_optional_values_count_as_absent():
    operation = CreateGlTransactionOperation(
        make_session(), make_transaction(), reference_no="", source_entity="", custom_fields=[]
    )
    assert tags(operation.create_function_contents()) == TRANSACTION_TAGS


def test_all_optional_fields_in_order():
    elements = _full_operation().create_function_contents()
    assert tags(elements) == TRANSACTION_TAGS + ["reversedate", "referenceno", "sourceentity", "customfields"]

    by_tag = {element.tag: element for element in elements}
    assert tags(list(by_tag["reversedate"])) == ["year", "month", "day"]
    assert by_tag["referenceno"].text == "REF-1"
    assert by_tag["sourceentity"].text == "US-EAST"
    custom_fields = by_tag["customfields"].findall("customfield")
    assert [cf.findtext("customfieldname") for cf in custom_fields] == ["A", "B"]


def test_function_element_wraps_contents():
    operation = _full_operation()
    function = operation.to_xml()
    assert function.tag == "function"
    assert function.get("controlid") == operation.control_id
    (create,) = list(function)
    assert create.tag == "create_gltransaction"
    assert create.findtext("referenceno") == "REF-1"


def test_operation_is_isolated_from_later_changes():
    transaction = make_transaction()
    custom_fields = [IntacctCustomField(name="A", value="1")]
    operation = CreateGlTransactionOperation(make_session(), transaction, custom_fields=custom_fields)

    transaction.add_entry_pair(Decimal("5"), "6100", None, None, None, None, None)
    custom_fields.append(IntacctCustomField(name="B", value="2"))

    assert len(operation.transaction.entries) == 2
    assert len(operation.custom_fields) == 1


def test_reverse_date_and_custom_fields_cannot_be_changed_in_place():
    custom_field = IntacctCustomField(name="A", value="1")
    reverse_date = IntacctDate.of(2024, 4, 1)
    operation = CreateGlTransactionOperation(
        make_session(), make_transaction(), custom_fields=[custom_field], reverse_date=reverse_date
    )
    before = [ET.tostring(element) for element in operation.create_function_contents()]

    with pytest.raises(ValidationError):
        custom_field.value = "CHANGED"
    with pytest.raises(ValidationError):
        reverse_date.value = reverse_date.value.replace(year=1999)

    assert [ET.tostring(element) for element in operation.create_function_contents()] == before
    assert operation.reverse_date.value == date(2024, 4, 1)
    assert operation.custom_fields[0].value == "1"


def test_control_ids_are_unique():
    assert _full_operation().control_id != _full_operation().control_id


def test_success_result_wraps_transaction():
    operation = _full_operation()
    result = operation.process_response(
        ET.fromstring(
            "<result><status>success</status><function>create_gltransaction</function>"
            f"<controlid>{operation.control_id}</controlid><key>4521</key></result>"
        )
    )
    assert result.success
    assert isinstance(result.value, IntacctGeneralLedgerTransaction)
    assert result.value.record_no == "4521"
    assert result.control_id == operation.control_id


def test_failure_result_carries_errors_unchanged():
    operation = _full_operation()
    result = operation.process_response(
        ET.fromstring(
            "<result><status>failure</status><function>create_gltransaction</function>"
            "<errormessage><error><errorno>PL05000053</errorno>"
            "<description>Transaction is not balanced</description>"
            "<description2>Debits 100.00, credits 90.00</description2>"
            "<correction>Balance the entries</correction></error></errormessage></result>"
        )
    )
    assert not result.success
    assert result.value is None
    (error,) = result.errors
    assert error.error_no == "PL05000053"
    assert error.description2 == "Debits 100.00, credits 90.00"
    assert error.correction == "Balance the entries"


def test_failure_without_error_block_still_fails():
    result = _full_operation().process_response(ET.fromstring("<result><status>aborted</status></result>"))
    assert not result.success
    assert "aborted" in result.errors[0].description


def test_success_without_key_is_malformed():
    with pytest.raises(MalformedResponseError):
        _full_operation().process_response(ET.fromstring("<result><status>success</status></result>"))


def test_round_trip_of_serialized_response():
    operation = _full_operation()
    data = wrap("gltransaction", make_transaction().to_xml_elements())
    result = operation.process_response_data(ET.fromstring(ET.tostring(data)))
    assert result.value == make_transaction()
