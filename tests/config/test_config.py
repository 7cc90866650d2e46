"""Test configuration management."""

from pathlib import Path

from id3handler.config.config import Config
from id3handler.config.paths import default_config_path


def test_default_config(repo_root: Path) -> None:
    """Default configuration is created at the portable repo location."""
    config = Config.load()
    assert config.log_file is None
    assert config.id3_version == 4
    assert default_config_path() == (repo_root / "config" / "config.toml").resolve()
    assert default_config_path().exists()


def test_save_load_toml(repo_root: Path) -> None:
    _ = repo_root  # acknowledge fixture usage
    original_config = Config(log_file=Path("/test/logs/id3handler.log"), id3_version=3)
    original_config.save()

    Config.reset()
    loaded_config = Config.load()

    assert loaded_config.log_file == Path("/test/logs/id3handler.log")
    assert loaded_config.id3_version == 3


def test_singleton_behavior(repo_root: Path) -> None:
    _ = repo_root  # acknowledge fixture usage
    config1 = Config.load()
    config2 = Config.load()
    assert config2 is config1


def test_toml_comments(repo_root: Path) -> None:
    _ = repo_root  # acknowledge fixture usage
    Config(log_file=Path("/test/logs/x.log")).save()

    content = default_config_path().read_text(encoding="utf-8")
    assert "# id3handler Configuration File" in content
    assert 'log_file = "/test/logs/x.log"' in content
    assert "id3_version = 4" in content


def test_unsupported_id3_version_falls_back(repo_root: Path) -> None:
    _ = repo_root  # acknowledge fixture usage
    default_config_path().parent.mkdir(parents=True, exist_ok=True)
    _ = default_config_path().write_text("id3_version = 2\n", encoding="utf-8")

    assert Config.load().id3_version == 4


def test_unknown_keys_are_ignored(repo_root: Path) -> None:
    _ = repo_root  # acknowledge fixture usage
    default_config_path().parent.mkdir(parents=True, exist_ok=True)
    _ = default_config_path().write_text(
        'base_path = "/music"\nid3_version = 3\n', encoding="utf-8"
    )

    assert Config.load().id3_version == 3


def test_empty_log_file_means_unset(repo_root: Path) -> None:
    _ = repo_root  # acknowledge fixture usage
    default_config_path().parent.mkdir(parents=True, exist_ok=True)
    _ = default_config_path().write_text('log_file = ""\n', encoding="utf-8")

    assert Config.load().log_file is None
