"""Pytest configuration and fixtures."""

import json

import pytest
from fastapi.testclient import TestClient

from facturas_api.database import DatabaseClient, get_db
from facturas_api.main import app


@pytest.fixture
def write_facturas(tmp_path):
    """Write a list of records to a temporary facturas file and return its path."""
    def _write(records):
        path = tmp_path / "facturas_result.json"
        path.write_text(json.dumps(records), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_facturas():
    """Mixed-casing records with out-of-order dates."""
    return [
        {"ncfElectronico": "E310000000001", "rncComprador": "101000001", "fechaEmision": "2024-01-10", "montoTotal": 100},
        {"NcfElectronico": " E310000000002 ", "RncComprador": "131000002", "FechaEmision": "2024-03-05", "MontoTotal": 200},
        {"ncfElectronico": "E320000000003", "rncComprador": "101000003", "fechaEmision": "2024-02-20", "montoTotal": 300},
        {"ncfElectronico": "E310000000004", "rncComprador": "131000004", "fechaEmision": "not a date", "montoTotal": 400},
        {"ncfElectronico": "E320000000005", "RncComprador": "101000005", "FechaEmision": "2024-03-05", "montoTotal": 500},
    ]


@pytest.fixture
def client_for(write_facturas):
    """Build a TestClient whose data file holds the given records (or is missing when None)."""
    clients = []

    def _client(records, missing_path=None):
        if records is None:
            path = missing_path
        else:
            path = write_facturas(records)
        app.dependency_overrides[get_db] = lambda: DatabaseClient(path)
        client = TestClient(app)
        clients.append(client)
        return client

    try:
        yield _client
    finally:
        app.dependency_overrides.clear()
        for client in clients:
            client.close()


@pytest.fixture
def anyio_backend():
    return "asyncio"
