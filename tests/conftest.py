import json

import pytest
from click.testing import CliRunner

from devcontainers.core.features import Features
from devcontainers.core.schema import build_schema


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def strict_schema():
    """Schema with no optional field groups: unknown keys are rejected."""
    return build_schema(Features())


@pytest.fixture
def lenient_schema():
    """Schema that keeps unknown keys in additional_fields."""
    return build_schema(Features(allow_unknown_fields=True))


@pytest.fixture
def full_schema():
    """Schema with every optional field group enabled."""
    return build_schema(Features(
        allow_unknown_fields=True,
        ide_customizations=True,
        compose_integration=True,
    ))


@pytest.fixture
def sample_document():
    """A devcontainer.json document exercising most union fields."""
    return {
        "name": "Full Stack Dev",
        "build": {
            "dockerfile": "Dockerfile",
            "context": "..",
            "args": {"VARIANT": "bullseye"},
        },
        "features": {
            "ghcr.io/devcontainers/features/docker-in-docker:2": {},
        },
        "forwardPorts": [3000, "db:5432", {"port": 9000, "label": "api"}],
        "portsAttributes": {
            "3000": {"label": "Frontend", "onAutoForward": "notify"},
        },
        "containerEnv": {
            "NODE_ENV": "development",
            "DATABASE_URL": "postgres://localhost:5432",
        },
        "remoteUser": "vscode",
        "mounts": [
            {"source": "node_modules", "target": "/workspace/node_modules", "type": "volume"},
            "source=${localEnv:HOME}/.ssh,target=/home/vscode/.ssh,type=bind",
        ],
        "postCreateCommand": "npm install && cargo build",
        "postStartCommand": ["npm", "run", "dev"],
        "postAttachCommand": {"server": "npm start", "db": "npm run db"},
        "shutdownAction": "stopContainer",
    }


@pytest.fixture
def project_dir(tmp_path, monkeypatch, sample_document):
    """Creates a project with .devcontainer/devcontainer.json and changes to it."""
    config_dir = tmp_path / ".devcontainer"
    config_dir.mkdir()
    (config_dir / "devcontainer.json").write_text(json.dumps(sample_document, indent=4))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def clean_features_env(monkeypatch):
    """Keep the caller's DEVCONTAINERS_FEATURES out of the default schema."""
    monkeypatch.delenv("DEVCONTAINERS_FEATURES", raising=False)
