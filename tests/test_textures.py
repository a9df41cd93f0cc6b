import pytest
from PIL import Image

from zeroengine.textures import Texture, TextureLoadError, TextureManager

WIDTH, HEIGHT = 7, 5


@pytest.fixture
def png(tmp_path):
    path = tmp_path / "image.png"
    Image.new("RGB", (WIDTH, HEIGHT), (10, 20, 30)).save(path)
    return path


def test_load_reads_size(png):
    texture = TextureManager().load(png)
    assert (texture.width, texture.height) == (WIDTH, HEIGHT)
    assert texture.path == str(png)


def test_load_is_cached(png):
    manager = TextureManager()
    first = manager.load(png)
    second = manager.load(str(png))
    assert first is second
    assert len(manager) == 1
    assert png in manager


def test_distinct_paths_give_distinct_textures(png, tmp_path):
    other = tmp_path / "other.png"
    Image.new("RGB", (HEIGHT, WIDTH)).save(other)
    manager = TextureManager()
    a = manager.load(png)
    b = manager.load(other)
    assert (b.width, b.height) == (a.height, a.width)
    assert len(manager) == 2


def test_missing_file_raises_and_is_not_cached(tmp_path):
    manager = TextureManager()
    missing = tmp_path / "missing.png"
    with pytest.raises(TextureLoadError):
        manager.load(missing)
    assert missing not in manager
    assert len(manager) == 0


def test_load_error_is_an_oserror(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")
    with pytest.raises(OSError):
        TextureManager().load(bad)


def test_release_clears_cache(png):
    manager = TextureManager()
    manager.load(png)
    manager.release()
    assert len(manager) == 0
    assert png not in manager


def test_textures_compare_by_path_and_size():
    assert Texture("a.png", 2, 3) == Texture("a.png", 2, 3, image=object())