"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Any, Dict, List
from fastapi.testclient import TestClient

from jobly.config.settings import DatabaseSettings, MonitoringSettings, SecuritySettings, Settings
from jobly.main import create_application
from jobly.shared.infrastructure.security import JWTManager


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        app_environment="testing",
        database=DatabaseSettings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'jobly_test.db'}"),
        security=SecuritySettings(secret_key="test-secret-key"),
        monitoring=MonitoringSettings(log_level="WARNING", log_format="json"),
    )


@pytest.fixture
def client(settings):
    """HTTP client against a fully wired application."""
    app = create_application(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def jwt_manager(settings) -> JWTManager:
    return JWTManager(settings)


@pytest.fixture
def admin_headers(jwt_manager) -> Dict[str, str]:
    token = jwt_manager.create_access_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(jwt_manager) -> Dict[str, str]:
    token = jwt_manager.create_access_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def job_payload() -> Dict[str, Any]:
    """Valid create payload."""
    return {
        "title": "Software Engineer",
        "salary": 120000,
        "equity": 0.05,
        "companyHandle": "acme",
    }


@pytest.fixture
def seeded_jobs(client, admin_headers) -> List[Dict[str, Any]]:
    """Create a small, varied set of jobs through the API."""
    payloads = [
        {"title": "Software Engineer", "salary": 120000, "equity": 0.05, "companyHandle": "acme"},
        {"title": "Data Analyst", "salary": 80000, "equity": 0, "companyHandle": "beta"},
        {"title": "Senior Software Engineer", "salary": 150000, "companyHandle": "acme"},
        {"title": "Intern", "companyHandle": "beta"},
    ]
    jobs = []
    for payload in payloads:
        response = client.post("/jobs", json=payload, headers=admin_headers)
        assert response.status_code == 201
        jobs.append(response.json()["job"])
    return jobs
