"""Tests for the HTTP endpoints."""

import base64
import io

from exceptions import AIServiceError


class TestPing:
    def test_ping(self, flask_client) -> None:
        response = flask_client.get("/ping")
        assert response.status_code == 200
        assert response.get_json()["status"] == "ok"


class TestOptions:
    def test_lists_languages_and_kinds(self, flask_client) -> None:
        body = flask_client.get("/options").get_json()
        assert body["default_language"] == "English"
        assert body["languages"][0] == "English"
        assert "Malayalam" in body["languages"]
        kinds = {k["value"]: k["label"] for k in body["analysis_kinds"]}
        assert kinds["risk_score"] == "Calculate Risk Score"
        assert len(kinds) == 6


class TestExtract:
    def test_multipart_upload(self, flask_client, ai_client) -> None:
        ai_client.extract_image_text.return_value = "LEASE"
        response = flask_client.post(
            "/extract",
            data={"file": (io.BytesIO(b"png-bytes"), "lease.png", "image/png")},
            content_type="multipart/form-data",
        )
        assert response.status_code == 200
        assert response.get_json() == {"text": "LEASE"}
        image_bytes, mime_type, _ = ai_client.extract_image_text.call_args.args
        assert image_bytes == b"png-bytes"
        assert mime_type == "image/png"

    def test_json_data_url(self, flask_client, ai_client) -> None:
        ai_client.extract_image_text.return_value = "CAPTURED"
        data_url = "data:image/jpeg;base64," + base64.b64encode(b"jpeg").decode()
        response = flask_client.post("/extract", json={"image": data_url})
        assert response.status_code == 200
        assert response.get_json()["text"] == "CAPTURED"

    def test_rejects_unsupported_upload(self, flask_client, ai_client) -> None:
        response = flask_client.post(
            "/extract",
            data={"file": (io.BytesIO(b"%PDF"), "lease.pdf", "application/pdf")},
            content_type="multipart/form-data",
        )
        assert response.status_code == 400
        ai_client.extract_image_text.assert_not_called()

    def test_rejects_missing_image(self, flask_client) -> None:
        response = flask_client.post("/extract", json={})
        assert response.status_code == 400

    def test_empty_extraction(self, flask_client, ai_client) -> None:
        ai_client.extract_image_text.return_value = ""
        response = flask_client.post("/extract", json={"image": "aGVsbG8=", "mime_type": "image/png"})
        assert response.status_code == 422
        assert "blurry or empty" in response.get_json()["error"]

    def test_service_failure(self, flask_client, ai_client) -> None:
        ai_client.extract_image_text.side_effect = AIServiceError("unavailable")
        response = flask_client.post("/extract", json={"image": "aGVsbG8=", "mime_type": "image/png"})
        assert response.status_code == 502
        assert response.get_json()["error"] == "Failed to extract text from image: unavailable"

    def test_oversized_upload(self, flask_client) -> None:
        flask_client.application.config["MAX_CONTENT_LENGTH"] = 16
        response = flask_client.post(
            "/extract",
            data={"file": (io.BytesIO(b"x" * 1024), "lease.png", "image/png")},
            content_type="multipart/form-data",
        )
        assert response.status_code == 413
        assert "error" in response.get_json()


class TestAnalyze:
    def test_summary(self, flask_client, ai_client, document_text) -> None:
        ai_client.generate_text.return_value = "### Document Overview\n- **Type:** Lease"
        response = flask_client.post("/analyze", json={"kind": "summarize", "document_text": document_text})
        body = response.get_json()
        assert response.status_code == 200
        assert body["kind"] == "summarize"
        assert body["target_language"] == "English"
        assert "<h3>Document Overview</h3>" in body["html"]
        assert "risk" not in body

    def test_null_target_language_defaults_to_english(self, flask_client, ai_client, document_text) -> None:
        ai_client.generate_text.return_value = "Summary"
        response = flask_client.post(
            "/analyze",
            json={"kind": "summarize", "document_text": document_text, "target_language": None},
        )
        assert response.status_code == 200
        assert response.get_json()["target_language"] == "English"
        ai_client.translate.assert_not_called()

    def test_risk_score(self, flask_client, ai_client, document_text, risk_json) -> None:
        ai_client.generate_json.return_value = risk_json(score=70, rating="High Risk")
        response = flask_client.post("/analyze", json={"kind": "risk_score", "document_text": document_text})
        body = response.get_json()
        assert response.status_code == 200
        assert body["risk"] == {"score": 70, "rating": "High Risk", "justification": ["a", "b"], "tier": "alarm"}
        assert 'data-tier="alarm"' in body["html"]

    def test_empty_document(self, flask_client, ai_client) -> None:
        response = flask_client.post("/analyze", json={"kind": "jargon", "document_text": ""})
        assert response.status_code == 400
        assert "cannot be empty" in response.get_json()["error"]
        assert ai_client.method_calls == []

    def test_missing_query(self, flask_client, document_text) -> None:
        response = flask_client.post("/analyze", json={"kind": "question", "document_text": document_text})
        assert response.status_code == 400
        assert "question is required" in response.get_json()["error"]

    def test_unknown_kind(self, flask_client, document_text) -> None:
        response = flask_client.post("/analyze", json={"kind": "poem", "document_text": document_text})
        assert response.status_code == 400
        assert "kind" in response.get_json()["error"]

    def test_missing_body(self, flask_client) -> None:
        response = flask_client.post("/analyze", data="", content_type="application/json")
        assert response.status_code == 400

    def test_malformed_risk_response(self, flask_client, ai_client, document_text) -> None:
        ai_client.generate_json.return_value = "{not json"
        response = flask_client.post("/analyze", json={"kind": "risk_score", "document_text": document_text})
        assert response.status_code == 502

    def test_service_failure(self, flask_client, ai_client, document_text) -> None:
        ai_client.generate_text.side_effect = AIServiceError("quota exceeded")
        response = flask_client.post("/analyze", json={"kind": "hidden_fees", "document_text": document_text})
        assert response.status_code == 502
        assert "quota exceeded" in response.get_json()["error"]
