# tests/config/test_env.py

import os
import pytest
from pathlib import Path

from comic_book_manager.config.env import (
    EnvError,
    REQUIRED_KEYS,
    find_project_dotenv,
    load_env,
    get_app_env,
    missing_keys,
)


def _write_env_file(dirpath, text=""):
    f = dirpath / ".env"
    f.write_text(text)
    return f


def _clear_keys(monkeypatch, *names):
    # setenv first so monkeypatch restores the original (absent) state even
    # after python-dotenv writes the variable back into os.environ.
    for n in names:
        monkeypatch.setenv(n, "placeholder")
        monkeypatch.delenv(n)


ALL_KEYS_TEXT = (
    "MARVEL_API_PUBLIC_KEY=file_public\n"
    "MARVEL_API_PRIVATE_KEY=file_private\n"
    "COMICVINE_API_KEY=file_comicvine\n"
)


def test_load_env_reads_file_and_sets_process_env_when_missing(tmp_path, monkeypatch):
    _clear_keys(monkeypatch, *REQUIRED_KEYS)
    f = _write_env_file(tmp_path, ALL_KEYS_TEXT)

    loaded = load_env(f)

    assert loaded["MARVEL_API_PUBLIC_KEY"] == "file_public"
    assert loaded["COMICVINE_API_KEY"] == "file_comicvine"
    assert os.environ["MARVEL_API_PRIVATE_KEY"] == "file_private"


def test_load_env_supports_export_quotes_and_comments(tmp_path, monkeypatch):
    _clear_keys(monkeypatch, "CBM_QUOTED", "CBM_EXPORTED")
    f = _write_env_file(
        tmp_path,
        '# comment line\n\nexport CBM_EXPORTED=yes\nCBM_QUOTED="a b c"  # trailing\n',
    )

    loaded = load_env(f)

    assert loaded == {"CBM_EXPORTED": "yes", "CBM_QUOTED": "a b c"}
    assert os.environ["CBM_QUOTED"] == "a b c"


def test_process_env_wins_over_dotenv_with_get_app_env(tmp_path, monkeypatch):
    _clear_keys(monkeypatch, *REQUIRED_KEYS)
    f = _write_env_file(tmp_path, ALL_KEYS_TEXT)
    monkeypatch.setenv("MARVEL_API_PUBLIC_KEY", "env_public")

    keys = get_app_env(f)

    assert keys.marvel_public_key == "env_public"        # env wins
    assert keys.marvel_private_key == "file_private"     # came from file
    assert keys.comicvine_api_key == "file_comicvine"


def test_load_env_override_true_file_wins(tmp_path, monkeypatch):
    _clear_keys(monkeypatch, *REQUIRED_KEYS)
    monkeypatch.setenv("MARVEL_API_PUBLIC_KEY", "env_public")
    f = _write_env_file(tmp_path, ALL_KEYS_TEXT)

    load_env(f, override=True)

    assert os.environ["MARVEL_API_PUBLIC_KEY"] == "file_public"


def test_load_env_missing_file_is_not_an_error(tmp_path):
    assert load_env(tmp_path / "nope.env") == {}


def test_load_env_rejects_non_utf8_file(tmp_path, monkeypatch):
    _clear_keys(monkeypatch, *REQUIRED_KEYS)
    f = tmp_path / ".env"
    f.write_bytes(b"MARVEL_API_PUBLIC_KEY=\xff\xfe\n")

    with pytest.raises(EnvError, match="cannot decode"):
        load_env(f)


def test_load_env_discovers_dotenv_in_parent_of_cwd(tmp_path, monkeypatch):
    _clear_keys(monkeypatch, "CBM_UPWARD")
    _write_env_file(tmp_path, "CBM_UPWARD=found\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    loaded = load_env()

    assert loaded == {"CBM_UPWARD": "found"}
    assert os.environ["CBM_UPWARD"] == "found"


def test_find_project_dotenv_searches_upward_from_start(tmp_path):
    f = _write_env_file(tmp_path, "X=1\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert find_project_dotenv(start=nested) == f


@pytest.mark.parametrize("missing", REQUIRED_KEYS)
def test_get_app_env_names_the_missing_variable(monkeypatch, missing):
    _clear_keys(monkeypatch, *REQUIRED_KEYS)
    for k in REQUIRED_KEYS:
        if k != missing:
            monkeypatch.setenv(k, "value")

    with pytest.raises(EnvError) as e:
        get_app_env(use_dotenv=False)

    assert str(e.value) == f"Missing required environment variable(s): {missing}"


def test_get_app_env_lists_every_missing_variable(monkeypatch):
    _clear_keys(monkeypatch, *REQUIRED_KEYS)
    monkeypatch.setenv("MARVEL_API_PUBLIC_KEY", "only_this")

    with pytest.raises(RuntimeError) as e:
        get_app_env(use_dotenv=False)

    msg = str(e.value)
    assert "MARVEL_API_PRIVATE_KEY" in msg
    assert "COMICVINE_API_KEY" in msg
    assert "MARVEL_API_PUBLIC_KEY" not in msg


def test_get_app_env_accepts_empty_value(monkeypatch):
    for k in REQUIRED_KEYS:
        monkeypatch.setenv(k, "value")
    monkeypatch.setenv("COMICVINE_API_KEY", "")

    assert missing_keys() == []
    assert get_app_env(use_dotenv=False).comicvine_api_key == ""


def test_get_app_env_nonexistent_dotenv_falls_back_to_process_env(monkeypatch, tmp_path: Path):
    for k in REQUIRED_KEYS:
        monkeypatch.setenv(k, f"{k.lower()}_value")

    keys = get_app_env(dotenv_path=tmp_path / ".env")

    assert keys.marvel_public_key == "marvel_api_public_key_value"
    assert keys.comicvine_api_key == "comicvine_api_key_value"
