"""Unit tests for Config and PathConfig (modmake.config).

Tests cover:
- Defaults and derived paths
- Namespace construction for modules, controllers and models
- Controller / routes / models / migrations file paths
- save/load round trip, from_env, validation
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from modmake.config import Config, PathConfig

pytestmark = pytest.mark.unit


class TestPathConfig:
    def test_defaults(self):
        paths = PathConfig()
        assert paths.app_dir == "app"
        assert paths.root_namespace == "App\\"
        assert paths.module == "Modules\\"
        assert paths.controllers == "\\Controllers"
        assert paths.models == "\\Models"
        assert paths.migrations == "\\Database\\Migrations"


class TestConfigDefaults:
    def test_defaults(self):
        config = Config()
        assert config.base_path == Path(".")
        assert config.stubs_dir == "resources/stubs"
        assert config.extension == "php"

    def test_app_path(self, project_root: Path):
        config = Config(base_path=project_root)
        assert config.app_path == project_root / "app"

    def test_stubs_path(self, project_root: Path):
        config = Config(base_path=project_root)
        assert config.stubs_path == project_root / "resources" / "stubs"

    def test_empty_extension_rejected(self):
        with pytest.raises(ValidationError):
            Config(extension="")


class TestNamespaces:
    def test_module_namespace(self, config: Config):
        assert config.module_namespace("Blog/Post") == "App\\Modules\\Blog\\Post"

    def test_module_namespace_accepts_backslashes(self, config: Config):
        assert config.module_namespace("Blog\\Post") == "App\\Modules\\Blog\\Post"

    def test_web_controller_namespace(self, config: Config):
        assert config.controller_namespace("Blog/Post") == "App\\Modules\\Blog\\Post\\Controllers"

    def test_api_controller_namespace(self, config: Config):
        assert (
            config.controller_namespace("Blog/Post", is_api=True)
            == "App\\Modules\\Blog\\Post\\Controllers\\Api"
        )

    def test_model_namespace(self, config: Config):
        assert config.model_namespace("Blog/Post") == "App\\Modules\\Blog\\Post\\Models"

    def test_custom_root_namespace(self):
        config = Config(paths=PathConfig(root_namespace="Acme\\"))
        assert config.module_namespace("Post") == "Acme\\Modules\\Post"


class TestPaths:
    def test_module_path(self, config: Config, project_root: Path):
        assert config.module_path("Blog/Post") == project_root / "app" / "Modules" / "Blog" / "Post"

    def test_web_controller_path(self, config: Config, project_root: Path):
        expected = project_root / "app/Modules/Blog/Post/Controllers/PostController.php"
        assert config.controller_path("Blog/Post", "Post") == expected

    def test_api_controller_path(self, config: Config, project_root: Path):
        expected = project_root / "app/Modules/Blog/Post/Controllers/Api/PostController.php"
        assert config.controller_path("Blog/Post", "Post", is_api=True) == expected

    def test_backslash_name_maps_to_same_path(self, config: Config):
        assert config.controller_path("Blog\\Post", "Post") == config.controller_path("Blog/Post", "Post")

    def test_routes_paths(self, config: Config, project_root: Path):
        routes = project_root / "app/Modules/Blog/Post/Routes"
        assert config.routes_path("Blog/Post") == routes / "web.php"
        assert config.routes_path("Blog/Post", is_api=True) == routes / "api.php"

    def test_models_path(self, config: Config, project_root: Path):
        assert config.models_path("Blog/Post") == project_root / "app/Modules/Blog/Post/Models"

    def test_migrations_path(self, config: Config, project_root: Path):
        expected = project_root / "app/Modules/Blog/Post/Database/Migrations"
        assert config.migrations_path("Blog/Post") == expected

    def test_custom_extension(self, project_root: Path):
        config = Config(base_path=project_root, extension="py")
        assert config.routes_path("Post").name == "web.py"
        assert config.controller_path("Post", "Post").name == "PostController.py"


class TestSerialisation:
    def test_save_and_load_round_trip(self, tmp_path: Path):
        config = Config(
            base_path=tmp_path / "shop",
            stubs_dir="stubs",
            paths=PathConfig(app_dir="src", root_namespace="Shop\\"),
        )
        target = config.save(tmp_path / "conf" / "modmake.json")
        assert target.exists()

        loaded = Config.load(target)
        assert loaded == config

    def test_load_invalid_json_raises(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text('{"extension": ""}', encoding="utf-8")
        with pytest.raises(ValidationError):
            Config.load(bad)


class TestFromEnv:
    def test_defaults_without_variables(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    def test_reads_variables(self):
        env = {
            "MODMAKE_BASE_PATH": "/srv/shop",
            "MODMAKE_STUBS_DIR": "stubs",
            "MODMAKE_EXTENSION": "inc",
            "MODMAKE_APP_DIR": "src",
            "MODMAKE_ROOT_NAMESPACE": "Shop\\",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.base_path == Path("/srv/shop")
        assert config.stubs_dir == "stubs"
        assert config.extension == "inc"
        assert config.paths.app_dir == "src"
        assert config.paths.root_namespace == "Shop\\"
