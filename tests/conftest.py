"""Shared fixtures for Cave Gallery tests."""

import base64
import io
import json
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from cavegallery.config import Settings, get_settings
from cavegallery.main import app
from cavegallery.models.painting import Painting
from cavegallery.storage import PaintingStore


@pytest.fixture(autouse=True)
def reset_id_counter(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with a fresh in-process ID counter."""
    monkeypatch.setattr(PaintingStore, "_last_id", 0)


@pytest.fixture
def png_bytes() -> bytes:
    """A small valid PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(139, 69, 19)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_data_uri(png_bytes: bytes) -> str:
    """The PNG fixture encoded the way the canvas front-end sends it."""
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def paintings_dir(tmp_path: Path) -> Path:
    """Isolated paintings directory."""
    return tmp_path / "paintings"


@pytest.fixture
def store(paintings_dir: Path) -> PaintingStore:
    """Painting store rooted in a temp directory."""
    return PaintingStore(paintings_dir)


@pytest.fixture
def settings(tmp_path: Path, paintings_dir: Path) -> Settings:
    """Settings pointing at temp directories."""
    return Settings(paintings_dir=paintings_dir, gallery_page=tmp_path / "gallery.html")


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Test client whose storage lives in a temp directory."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


def _write_record(
    root: Path, painting_id: int, story: str = "A story", with_image: bool = True
) -> None:
    """Write a painting pair directly to disk, bypassing the store."""
    root.mkdir(parents=True, exist_ok=True)
    painting = Painting.new(painting_id, story, "Uga")
    (root / f"{painting_id}.json").write_text(json.dumps(painting.to_document()), encoding="utf-8")
    if with_image:
        (root / painting.filename).write_bytes(b"\x89PNG fake")


@pytest.fixture
def write_record() -> Callable[..., None]:
    """Helper that writes painting files straight into a directory."""
    return _write_record

