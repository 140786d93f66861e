"""
Pytest configuration and fixtures for the JSON2CSV tests.
"""

import pytest


@pytest.fixture
def test_client():
    """Create a test client for the FastAPI app."""
    from fastapi.testclient import TestClient
    from json2csv_web.api import app

    return TestClient(app)


@pytest.fixture
def sample_products_json():
    """The single-product document used across the endpoint tests."""
    return """
    [
      {
        "id": 1,
        "nome": "Produto A",
        "linkImagem": "https://exemplo.com/img.jpg  "
      }
    ]
    """


@pytest.fixture
def sample_products_csv():
    return "id,nome,linkImagem\n1,Produto A,https://exemplo.com/img.jpg  "
