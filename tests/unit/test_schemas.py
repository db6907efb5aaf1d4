import pytest
from monoweb.schemas import DownloadResponse, TransformRequest, TransformResponse, ErrorResponse

class TestSchemaValidation:
    """Unit tests for Pydantic wire schemas"""

    def test_download_response(self):
        response = DownloadResponse(status=200, contentType="text/html", content="<p>x</p>")
        assert response.model_dump() == {"status": 200, "contentType": "text/html", "content": "<p>x</p>"}

    def test_transform_request_fields_optional(self):
        """Test missing body fields parse so the route can answer 400"""
        request = TransformRequest()
        assert request.htmlContent is None
        assert request.originalUrl is None

    def test_transform_response_warning_omitted(self):
        response = TransformResponse(modifiedContent="<p>x</p>")
        assert response.model_dump(exclude_none=True) == {"modifiedContent": "<p>x</p>"}

    def test_error_response(self):
        error = ErrorResponse(error="Failed to fetch URL", details="boom")
        assert error.model_dump() == {"error": "Failed to fetch URL", "details": "boom"}
        assert ErrorResponse(error="x").model_dump(exclude_none=True) == {"error": "x"}
