"""Shared test fixtures for nodejs-lambda-utils."""

import json
from pathlib import Path

import pytest

from nodejs_lambda_utils.core.dependencies import clear_manifest_cache

# Get the fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"
STACKS_DIR = FIXTURES_DIR / "stacks"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def node_stack() -> str:
    """Load a stack printed by a script run directly with node."""
    return (STACKS_DIR / "node18.txt").read_text()


@pytest.fixture
def lambda_stack() -> str:
    """Load a Lambda handler stack with async and unparseable frames."""
    return (STACKS_DIR / "lambda.txt").read_text()


@pytest.fixture
def construct_stack() -> str:
    """Load a stack captured inside a construct's constructor."""
    return (STACKS_DIR / "construct.txt").read_text()


@pytest.fixture(autouse=True)
def _fresh_manifest_cache() -> None:
    """Keep package.json reads from leaking between tests."""
    clear_manifest_cache()


@pytest.fixture
def write_json():
    """Return a helper that writes a JSON document, creating parent directories."""

    def _write(path: Path, data: object) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data))
        return path

    return _write
