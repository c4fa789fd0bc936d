import pytest
from fastapi.testclient import TestClient

from regexform import FormPattern, create_app


@pytest.fixture
def strict():
    return FormPattern.strict()


@pytest.fixture
def client(strict):
    return TestClient(create_app(strict))


@pytest.fixture
def permissive_client():
    return TestClient(create_app())
