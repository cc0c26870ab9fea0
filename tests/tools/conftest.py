"""Fixtures for tool handler tests.

Handlers run against the real executor, prompt builders and workspace
helpers; only the Gemini client is replaced.
"""

import pytest

from ui_designer_mcp.config import ServerConfig
from ui_designer_mcp.core.providers import GenerationResult
from ui_designer_mcp.core.resilience import (
    RequestScheduler,
    ResilientExecutor,
    ResourceSelector,
    RetryPolicy,
)
from ui_designer_mcp.server import build_services


class FakeGeminiClient:
    """Records every call and replays scripted outcomes.

    ``outcomes`` is consumed one entry per call; exceptions are raised,
    results returned. When the script runs out ``default`` is returned.
    """

    def __init__(self, *outcomes, default=None):
        self.outcomes = list(outcomes)
        self.default = default
        self.calls = []

    def script(self, *outcomes):
        self.outcomes.extend(outcomes)
        return self

    async def _respond(self, method, model, prompt, **extra):
        self.calls.append({"method": method, "model": model, "prompt": prompt, **extra})
        outcome = self.outcomes.pop(0) if self.outcomes else self.default
        if isinstance(outcome, BaseException):
            raise outcome
        if callable(outcome):
            return await outcome(model)
        if outcome is None:
            return GenerationResult(model=model, text_parts=[f"{method} output"])
        return outcome

    async def generate_text(self, model, prompt):
        return await self._respond("generate_text", model, prompt)

    async def generate_image(self, model, prompt):
        return await self._respond("generate_image", model, prompt)

    async def generate_with_image(self, model, prompt, image_data, mime_type):
        return await self._respond(
            "generate_with_image", model, prompt, image_data=image_data, mime_type=mime_type
        )


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def workspace_root(tmp_path):
    (tmp_path / "package.json").write_text('{"name": "acme-web"}')
    return tmp_path


@pytest.fixture
def gemini():
    return FakeGeminiClient()


@pytest.fixture
def make_services(workspace_root, sleeps, gemini):
    """Factory building DesignServices around a FakeGeminiClient."""

    async def record_sleep(seconds):
        sleeps.append(seconds)

    def factory(client=None, *, image_timeout=120.0):
        config = ServerConfig(workspace_root=workspace_root)
        config.resilience.image_timeout = image_timeout
        executor = ResilientExecutor(
            RequestScheduler(0.0),
            ResourceSelector.from_settings(config.gemini),
            RetryPolicy(max_retries=3, initial_delay=0.3),
            sleep=record_sleep,
        )
        return build_services(
            config, client=client or gemini, executor=executor
        )

    return factory


@pytest.fixture
def services(make_services):
    return make_services()
