from src.api.errors import create_error_response, create_unexpected_error_response, render_error
from src.core.errors import BadRequestError, UpstreamError


class TestCreateErrorResponse:
    def test_client_error_body(self) -> None:
        response = create_error_response(BadRequestError("Missing GitHub event header"), include_stack=True)

        assert render_error(response) == {"error": "Missing GitHub event header"}

    def test_server_error_keeps_diagnostic_fields(self) -> None:
        error = UpstreamError("Failed to trigger workflow", status=422, details={"message": "bad"})

        body = render_error(create_error_response(error))

        assert body == {"error": "Failed to trigger workflow", "status": 422, "details": {"message": "bad"}}

    def test_stack_only_for_server_errors_in_diagnostic_mode(self) -> None:
        try:
            raise UpstreamError("Network error", "boom")
        except UpstreamError as e:
            error = e

        assert "stack" not in render_error(create_error_response(error))
        assert "UpstreamError" in render_error(create_error_response(error, include_stack=True))["stack"]


class TestCreateUnexpectedErrorResponse:
    def test_hides_stack_by_default(self) -> None:
        body = render_error(create_unexpected_error_response(RuntimeError("kaboom")))

        assert body == {"error": "Server error", "message": "kaboom"}

    def test_includes_stack_in_diagnostic_mode(self) -> None:
        try:
            raise RuntimeError("kaboom")
        except RuntimeError as e:
            body = render_error(create_unexpected_error_response(e, include_stack=True))

        assert "RuntimeError: kaboom" in body["stack"]

    def test_empty_message(self) -> None:
        body = render_error(create_unexpected_error_response(RuntimeError()))

        assert body["message"] == "Unknown error occurred"
