from app.config.settings import settings
from app.logging_config import get_recent_logs
from app.prompts.humanizer import get_templates, render_template


HUMANIZE_URL = f"{settings.API_V1_STR}/humanize"


def test_balanced_end_to_end(make_stub, client_with_stub):
    stub = make_stub(lambda prompt: "The cat was sitting on the mat.")
    client = client_with_stub(stub)

    response = client.post(HUMANIZE_URL, json={"text": "The cat sat on the mat.", "mode": "balanced"})

    assert response.status_code == 200
    body = response.json()
    assert body["humanizedText"] == "The cat was sitting on the mat."
    assert body["mode"] == "balanced"
    assert body["stats"]["original"] == {"words": 6, "characters": 23}
    assert body["stats"]["humanized"] == {"words": 7, "characters": 31}
    assert stub.call_count == 1
    assert "The cat sat on the mat." in stub.prompts[0]


def test_mode_defaults_to_balanced(make_stub, client_with_stub):
    stub = make_stub(["Rewritten."])
    client = client_with_stub(stub)

    response = client.post(HUMANIZE_URL, json={"text": "Original."})

    assert response.status_code == 200
    assert response.json()["mode"] == "balanced"
    assert stub.prompts[0] == render_template(get_templates("balanced"), "Original.")


def test_stealth_end_to_end(make_stub, client_with_stub):
    stub = make_stub(["- AI is great", "AI's honestly pretty great."])
    client = client_with_stub(stub)

    response = client.post(HUMANIZE_URL, json={"text": "AI is great.", "mode": "stealth"})

    assert response.status_code == 200
    assert response.json()["humanizedText"] == "AI's honestly pretty great."
    assert stub.call_count == 2
    assert "- AI is great" in stub.prompts[1]


def test_empty_text_is_a_client_error_without_calls(make_stub, client_with_stub):
    stub = make_stub()
    client = client_with_stub(stub)

    for payload in ({"text": ""}, {"mode": "subtle"}):
        response = client.post(HUMANIZE_URL, json=payload)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Text is required", "error_code": "EMPTY_TEXT"}

    assert stub.call_count == 0


def test_unknown_mode_is_a_client_error_without_calls(make_stub, client_with_stub):
    stub = make_stub()
    client = client_with_stub(stub)

    response = client.post(HUMANIZE_URL, json={"text": "Hello.", "mode": "aggressive"})

    assert response.status_code == 400
    assert response.json()["error_code"] == "INVALID_MODE"
    assert "aggressive" in response.json()["error"]
    assert stub.call_count == 0


def test_invalid_json_is_a_client_error(make_stub, client_with_stub):
    stub = make_stub()
    client = client_with_stub(stub)

    response = client.post(HUMANIZE_URL, content=b"{not json", headers={"content-type": "application/json"})

    assert response.status_code == 400
    assert response.json()["error_code"] == "INVALID_PAYLOAD"
    assert stub.call_count == 0


def test_generation_failure_is_generic_server_error(make_stub, client_with_stub, generation_failure):
    stub = make_stub([generation_failure])
    client = client_with_stub(stub)

    response = client.post(HUMANIZE_URL, json={"text": "Hello.", "mode": "strong"})

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Failed to humanize text",
        "error_code": "HUMANIZE_FAILED"
    }
    assert "quota-project-secret" not in response.text


def test_stealth_failure_is_logged_with_stage(make_stub, client_with_stub, generation_failure):
    stub = make_stub([generation_failure, "unused"])
    client = client_with_stub(stub)

    response = client.post(HUMANIZE_URL, json={"text": "Hello.", "mode": "stealth"})

    assert response.status_code == 500
    assert stub.call_count == 1
    errors = [log for log in get_recent_logs(1000) if log["level"] == "ERROR"]
    assert errors
    assert errors[-1]["stage"] == "stealth:extract"
    assert "quota-project-secret" in errors[-1]["message"]
    assert "exception" in errors[-1]


def test_modes_endpoint(make_stub, client_with_stub):
    client = client_with_stub(make_stub())

    response = client.get(f"{HUMANIZE_URL}/modes")

    assert response.status_code == 200
    body = response.json()
    assert body["default_mode"] == "balanced"
    assert {mode["id"]: mode["stages"] for mode in body["modes"]} == {
        "subtle": 1,
        "balanced": 1,
        "strong": 1,
        "stealth": 2
    }


def test_diff_endpoint(make_stub, client_with_stub):
    stub = make_stub()
    client = client_with_stub(stub)

    response = client.post(
        f"{HUMANIZE_URL}/diff",
        json={"original": "The cat sat on the mat.", "result": "The cat was sitting on the mat."}
    )

    assert response.status_code == 200
    body = response.json()
    spans = body["spans"]
    assert "".join(s["text"] for s in spans if s["op"] != "insert") == "The cat sat on the mat."
    assert "".join(s["text"] for s in spans if s["op"] != "delete") == "The cat was sitting on the mat."
    assert '<span class="diff-insert">' in body["html"]
    assert body["stats"]["humanized"]["words"] == 7
    assert stub.call_count == 0


def test_health_reports_missing_api_key(monkeypatch, make_stub, client_with_stub):
    monkeypatch.setattr(settings, "GOOGLE_API_KEY", None)
    client = client_with_stub(make_stub())

    response = client.get(f"{HUMANIZE_URL}/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


def test_health_reports_configured_model(monkeypatch, make_stub, client_with_stub):
    monkeypatch.setattr(settings, "GOOGLE_API_KEY", "configured")
    client = client_with_stub(make_stub())

    response = client.get(f"{HUMANIZE_URL}/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "model": settings.HUMANIZER_MODEL}


def test_whitespace_only_text_is_forwarded(make_stub, client_with_stub):
    stub = make_stub(["Rewritten."])
    client = client_with_stub(stub)

    response = client.post(HUMANIZE_URL, json={"text": "   ", "mode": "subtle"})

    assert response.status_code == 200
    assert response.json()["humanizedText"] == "Rewritten."
    assert stub.prompts[0] == render_template(get_templates("subtle"), "   ")


def test_error_logs_filter_by_stage(make_stub, client_with_stub, generation_failure):
    client = client_with_stub(make_stub([generation_failure, "- idea", generation_failure]))

    client.post(HUMANIZE_URL, json={"text": "Hello.", "mode": "stealth"})
    client.post(HUMANIZE_URL, json={"text": "Hello.", "mode": "stealth"})

    extract = client.get(f"{settings.API_V1_STR}/logs/errors", params={"stage": "stealth:extract"}).json()
    rewrite = client.get(f"{settings.API_V1_STR}/logs/errors", params={"stage": "stealth:rewrite"}).json()
    everything = client.get(f"{settings.API_V1_STR}/logs/errors").json()

    assert extract["stage_filter"] == "stealth:extract"
    assert extract["total_errors"] == 1
    assert rewrite["total_errors"] == 1
    assert everything["total_errors"] == 2
