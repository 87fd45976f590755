import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from main import app
from services.errors import PredictionTimeout, UpstreamError
from services.llm_service import LLMService, get_llm_backend
from services.replicate_client import ReplicateClient

API_URL = "https://api.replicate.com/v1/predictions"


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use(backend):
    app.dependency_overrides[get_llm_backend] = lambda: backend
    return backend


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "codeforge"}


def test_missing_api_key_returns_500(client, fake_backend):
    backend = _use(fake_backend(configured=False))

    response = client.post("/api/generate", json={"prompt": "write python"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "API key is not configured. Please set the REPLICATE_API_KEY environment variable."
    }
    assert backend.prompts == []


def test_missing_openai_key_names_openai_variable(client, settings):
    _use(LLMService(settings.model_copy(update={"LLM_PROVIDER": "openai", "OPENAI_API_KEY": ""})))

    response = client.post("/api/generate", json={"prompt": "write python"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "API key is not configured. Please set the OPENAI_API_KEY environment variable."
    }


@pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": "   "}, {"prompt": 42}, ["x"]])
def test_missing_prompt_returns_400(client, fake_backend, body):
    _use(fake_backend())

    response = client.post("/api/generate", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Prompt is required"}


def test_unreadable_body_returns_400(client, fake_backend):
    _use(fake_backend())

    response = client.post("/api/generate", content=b"not json")

    assert response.status_code == 400
    assert response.json() == {"error": "Prompt is required"}


def test_generate_returns_cleaned_code_and_language(client, fake_backend):
    backend = _use(fake_backend(output="```go\nfunc main() {\nfmt.Println(1) // hi\n}\n```"))

    response = client.post("/api/generate", json={"prompt": "a golang hello world"})

    assert response.status_code == 200
    assert response.json() == {"code": "func main() {\n\tfmt.Println(1)\n}", "language": "go"}
    assert backend.prompts[0].startswith("Write code for this task:\na golang hello world\n")
    assert "- Use go\n" in backend.prompts[0]


def test_upstream_status_is_proxied(client, fake_backend):
    _use(fake_backend(error=UpstreamError("Payment required. Please check your Replicate API account balance.", 402)))

    response = client.post("/api/generate", json={"prompt": "sort numbers"})

    assert response.status_code == 402
    assert response.json()["error"].startswith("Payment required")


def test_timeout_is_reported_inline(client, fake_backend):
    _use(fake_backend(error=PredictionTimeout("Prediction timed out")))

    response = client.post("/api/generate", json={"prompt": "sort numbers"})

    assert response.status_code == 500
    assert response.json() == {"error": "Prediction timed out"}


def test_unexpected_error_returns_500(client, fake_backend):
    _use(fake_backend(error=RuntimeError("boom")))

    response = client.post("/api/generate", json={"prompt": "sort numbers"})

    assert response.status_code == 500
    assert response.json() == {"error": "boom"}


def test_generate_end_to_end_against_replicate(client, settings):
    _use(ReplicateClient(settings))

    with respx.mock() as router:
        router.post(API_URL).mock(return_value=httpx.Response(201, json={"id": "p9", "status": "starting"}))
        router.get(f"{API_URL}/p9").mock(
            return_value=httpx.Response(
                200,
                json={"id": "p9", "status": "succeeded", "output": ["```rust\n", "fn main() {\n", "println!(\"hi\");\n}\n```"]},
            )
        )

        response = client.post("/api/generate", json={"prompt": "rust hello world"})

    assert response.status_code == 200
    assert response.json() == {"code": 'fn main() {\n    println!("hi");\n}', "language": "rust"}


def test_list_languages(client):
    response = client.get("/api/languages")

    assert response.status_code == 200
    languages = {item["language"]: item for item in response.json()}
    assert set(languages) == {"python", "typescript", "java", "cpp", "rust", "go"}
    assert languages["go"] == {"language": "go", "tab_size": 2, "insert_spaces": False}
