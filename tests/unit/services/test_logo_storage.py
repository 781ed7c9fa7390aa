"""Unit tests for LocalLogoStorage"""

from src.adapter.services.logo_storage import LocalLogoStorage


def test_resolves_relative_locator(tmp_path):
    (tmp_path / "logo-1.png").write_bytes(b"png")
    storage = LocalLogoStorage(str(tmp_path))

    assert storage.resolve("logo-1.png") == str(tmp_path / "logo-1.png")


def test_missing_file_and_empty_locator(tmp_path):
    storage = LocalLogoStorage(str(tmp_path))

    assert storage.resolve("missing.png") is None
    assert storage.resolve(None) is None
    assert storage.resolve("") is None


def test_locator_cannot_escape_storage_dir(tmp_path):
    base_dir = tmp_path / "logos"
    base_dir.mkdir()
    (tmp_path / "secret.png").write_bytes(b"png")
    storage = LocalLogoStorage(str(base_dir))

    assert storage.resolve("../secret.png") is None


def test_absolute_locator(tmp_path):
    logo = tmp_path / "logo.png"
    logo.write_bytes(b"png")
    storage = LocalLogoStorage(str(tmp_path / "elsewhere"))

    assert storage.resolve(str(logo)) == str(logo)
