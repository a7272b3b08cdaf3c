import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from recipe_finder import main
from recipe_finder.api.generate import get_recipe_generator
from recipe_finder.services.llm.chat_client import LLMConfig
from recipe_finder.services.llm.recipe_generator import RecipeGenerator

LLM_URL = "https://llm.test/v1/chat/completions"


@pytest.fixture(name="llm_config")
def llm_config_fixture():
    return LLMConfig(base_url=LLM_URL, api_key="test-key", model="test-model", timeout_s=5.0)


@pytest.fixture(name="generator")
def generator_fixture(llm_config):
    return RecipeGenerator(llm_config)


@pytest.fixture(name="client")
def client_fixture(generator):
    main.app.dependency_overrides[get_recipe_generator] = lambda: generator
    client = TestClient(main.app)
    yield client
    main.app.dependency_overrides.clear()
