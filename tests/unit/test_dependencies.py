"""Tests for dependency version extraction."""

from pathlib import Path

import pytest

from nodejs_lambda_utils.core.dependencies import (
    declared_dependencies,
    extract_dependencies,
    installed_version,
    load_manifest,
)
from nodejs_lambda_utils.utils.errors import DependencyVersionError


@pytest.fixture
def app(tmp_path: Path, write_json) -> Path:
    """Create an app with declared and installed dependencies.

    Returns the path to the app's package.json.
    """
    pkg = write_json(
        tmp_path / "app" / "package.json",
        {
            "name": "app",
            "dependencies": {"aws-sdk": "^2.1000.0", "shared": "1.0.0"},
            "devDependencies": {"esbuild": "0.19.5", "shared": "2.0.0"},
            "peerDependencies": {"constructs": "^10.0.0"},
        },
    )
    write_json(
        tmp_path / "app" / "node_modules" / "tslib" / "package.json",
        {"name": "tslib", "version": "2.6.2"},
    )
    write_json(
        tmp_path / "app" / "node_modules" / "@aws-sdk" / "types" / "package.json",
        {"name": "@aws-sdk/types", "version": "3.428.0"},
    )
    # Hoisted into a parent directory, as in a monorepo
    write_json(
        tmp_path / "node_modules" / "source-map" / "package.json",
        {"name": "source-map", "version": "0.7.4"},
    )
    return pkg


class TestDeclaredDependencies:
    """Tests for declared_dependencies."""

    def test_merges_sections(self) -> None:
        """Test that later sections override earlier ones."""
        manifest = {
            "dependencies": {"a": "1", "b": "1"},
            "devDependencies": {"b": "2"},
            "peerDependencies": {"c": "3"},
        }

        assert declared_dependencies(manifest) == {"a": "1", "b": "2", "c": "3"}

    def test_missing_and_null_sections(self) -> None:
        """Test manifests without dependency sections."""
        assert declared_dependencies({"name": "x"}) == {}
        assert declared_dependencies({"dependencies": None}) == {}


class TestExtractDependencies:
    """Tests for extract_dependencies."""

    def test_declared_versions(self, app: Path) -> None:
        """Test versions taken straight from package.json."""
        result = extract_dependencies(app, ["aws-sdk", "esbuild", "constructs"])

        assert result == {
            "aws-sdk": "^2.1000.0",
            "esbuild": "0.19.5",
            "constructs": "^10.0.0",
        }

    def test_dev_dependency_overrides_dependency(self, app: Path) -> None:
        """Test section precedence."""
        assert extract_dependencies(app, ["shared"]) == {"shared": "2.0.0"}

    def test_installed_fallback(self, app: Path) -> None:
        """Test falling back to an installed transitive dependency."""
        assert extract_dependencies(app, ["tslib"]) == {"tslib": "2.6.2"}

    def test_scoped_installed_fallback(self, app: Path) -> None:
        """Test a scoped package in node_modules."""
        assert extract_dependencies(app, ["@aws-sdk/types"]) == {"@aws-sdk/types": "3.428.0"}

    def test_hoisted_installed_fallback(self, app: Path) -> None:
        """Test resolving from a parent directory's node_modules."""
        assert extract_dependencies(app, ["source-map"]) == {"source-map": "0.7.4"}

    def test_preserves_request_order(self, app: Path) -> None:
        """Test that result keys follow the requested order."""
        result = extract_dependencies(app, ["tslib", "aws-sdk"])

        assert list(result) == ["tslib", "aws-sdk"]

    def test_empty_modules(self, app: Path) -> None:
        """Test that no modules gives an empty mapping."""
        assert extract_dependencies(app, []) == {}

    def test_unknown_module_raises(self, app: Path) -> None:
        """Test a module that is neither declared nor installed."""
        with pytest.raises(DependencyVersionError) as exc_info:
            extract_dependencies(app, ["aws-sdk", "left-pad"])

        assert str(exc_info.value) == (
            "Cannot extract version for module 'left-pad'. "
            "Check that it's referenced in your package.json or installed."
        )
        assert exc_info.value.module == "left-pad"

    def test_broken_installed_manifest_raises(self, app: Path) -> None:
        """Test that an unreadable installed manifest counts as not installed."""
        broken = app.parent / "node_modules" / "broken" / "package.json"
        broken.parent.mkdir(parents=True)
        broken.write_text("{not json")

        with pytest.raises(DependencyVersionError):
            extract_dependencies(app, ["broken"])

    def test_missing_manifest_raises(self, tmp_path: Path) -> None:
        """Test that a missing package.json raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            extract_dependencies(tmp_path / "package.json", ["x"])

    def test_accepts_string_path(self, app: Path) -> None:
        """Test a string path to package.json."""
        assert extract_dependencies(str(app), ["esbuild"]) == {"esbuild": "0.19.5"}


class TestLoadManifest:
    """Tests for load_manifest."""

    def test_cached(self, tmp_path: Path, write_json) -> None:
        """Test that a manifest is read once."""
        pkg = write_json(tmp_path / "package.json", {"dependencies": {"a": "1"}})
        first = load_manifest(pkg)

        pkg.write_text('{"dependencies": {"a": "2"}}')

        assert load_manifest(pkg) is first

    def test_non_object_rejected(self, tmp_path: Path, write_json) -> None:
        """Test that a JSON array is not a manifest."""
        pkg = write_json(tmp_path / "package.json", ["not", "a", "manifest"])

        with pytest.raises(ValueError, match="not a JSON object"):
            load_manifest(pkg)


class TestInstalledVersion:
    """Tests for installed_version."""

    def test_missing_version_field(self, tmp_path: Path, write_json) -> None:
        """Test an installed manifest without a version."""
        write_json(tmp_path / "node_modules" / "noversion" / "package.json", {"name": "noversion"})

        assert installed_version("noversion", tmp_path) is None

    def test_not_installed(self, tmp_path: Path) -> None:
        """Test a module that isn't installed."""
        assert installed_version("definitely-not-installed-9c1e", tmp_path) is None
