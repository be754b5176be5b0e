from typing import Callable, List, Optional, Union

import pytest
from fastapi.testclient import TestClient

from app.core.humanizer.errors import GenerationError
from app.core.humanizer.pipeline import HumanizerPipeline, get_humanizer_pipeline
from app.logging_config import clear_logs
from app.main import app


Response = Union[str, BaseException]


class StubGenerationClient:
    """Records every prompt and answers from a script.

    `responses` is either a list consumed in call order (an exception in the
    list is raised instead of returned) or a callable `prompt -> str`.
    """

    def __init__(self, responses: Optional[Union[List[Response], Callable[[str], str]]] = None):
        self.responses = responses
        self.prompts: List[str] = []

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.responses is None:
            return prompt
        if callable(self.responses):
            return self.responses(prompt)
        response = self.responses[len(self.prompts) - 1]
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture
def make_stub():
    return StubGenerationClient


@pytest.fixture
def generation_failure():
    return GenerationError(
        "Generation request failed: 429 RESOURCE_EXHAUSTED quota-project-secret",
        cause=RuntimeError("quota-project-secret")
    )


@pytest.fixture(autouse=True)
def empty_log_buffer():
    clear_logs()
    yield
    clear_logs()


@pytest.fixture
def client_with_stub():
    """Build a TestClient whose humanize route uses the given stub"""
    def _make(stub: StubGenerationClient) -> TestClient:
        app.dependency_overrides[get_humanizer_pipeline] = lambda: HumanizerPipeline(stub)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
