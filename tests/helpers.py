TEST_OPENAI_KEY = "sk-test-openai-key"
TEST_PUBMED_KEY = "test-pubmed-key"


def assert_error_envelope(response, status_code, error=None):
    """Assert a JSON error envelope with the given status (and message, when given)."""
    assert response.status_code == status_code, response.text
    payload = response.json()
    assert "error" in payload, f"'error' is missing from the response: {payload}"
    if error is not None:
        assert payload["error"] == error
    return payload


def assert_no_secret(response, *secrets):
    """Assert that none of the server-held secrets leaked into the body."""
    for secret in secrets:
        assert secret not in response.text, "Secret leaked into the response body"


def assert_not_called(stub):
    """Assert that the upstream stub never received a request."""
    assert stub.call_count == 0, f"Expected no upstream calls, got {stub.calls}"
