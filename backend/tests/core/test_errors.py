"""Error Hierarchy - status codes, categories and the REST envelope."""

from commerce.core.errors import (
    CommerceError, ConflictError, DatabaseError, DomainInvariantError,
    ErrorCategory, InvalidTransitionError, PayloadValidationError,
    ResourceNotFoundError,
)


def test_not_found_is_typed_404_and_mentions_not_found():
    err = ResourceNotFoundError("Client", "abc")
    assert err.http_status == 404
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert "not found" in err.message
    assert err.context.entity_id == "abc"


def test_to_response_envelope():
    err = DomainInvariantError("Amount must be greater than 0", "amount")
    assert err.to_response() == {
        "error": "Amount must be greater than 0",
        "code": "DOMAIN_INVARIANT_VIOLATED",
    }
    assert err.http_status == 400


def test_payload_validation_error_joins_messages_and_keeps_details():
    violations = [
        {"field": "orderId", "message": '"orderId" is required'},
        {"field": "amount", "message": '"amount" must be a number'},
    ]
    body = PayloadValidationError(violations).to_response()
    assert body["error"] == '"orderId" is required; "amount" must be a number'
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"] == violations


def test_status_codes_by_kind():
    assert ConflictError("dup").http_status == 409
    assert InvalidTransitionError("approved", "declined").http_status == 409
    assert DatabaseError("Connection or operational error", "execute").http_status == 500


def test_all_errors_share_base():
    for err in (
        ConflictError("x"),
        DatabaseError("x", "query"),
        ResourceNotFoundError("Product", "p"),
    ):
        assert isinstance(err, CommerceError)
