import os
import wave

import pygame
import pytest

from tilequest.resources import (
    Document,
    Font,
    Music,
    ResourceError,
    ResourceManager,
    ResourceType,
    Sound,
    Texture,
)

FONT_PATH = os.path.join(os.path.dirname(pygame.__file__), "freesansbold.ttf")


@pytest.fixture
def image_path(tmp_path):
    surface = pygame.Surface((4, 3))
    surface.fill((200, 10, 10))
    path = tmp_path / "image.png"
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def wav_path(tmp_path):
    path = tmp_path / "beep.wav"
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(8000)
        out.writeframes(b"\x00\x01" * 100)
    return path


def test_load_texture_records_metadata(image_path):
    manager = ResourceManager()
    texture = manager.load("wall", ResourceType.TEXTURE, image_path)
    assert isinstance(texture, Texture)
    assert texture.id == "wall"
    assert texture.path == str(image_path)
    assert texture.ref_count == 0
    assert texture.type is ResourceType.TEXTURE
    assert texture.size == (4, 3)


def test_exists_is_per_type(image_path):
    manager = ResourceManager()
    manager.load("wall", ResourceType.TEXTURE, image_path)
    assert manager.exists("wall", ResourceType.TEXTURE) is True
    assert manager.exists("wall", ResourceType.FONT) is False
    assert manager.exists("floor", ResourceType.TEXTURE) is False


def test_missing_file_raises_and_leaves_nothing(tmp_path):
    manager = ResourceManager()
    with pytest.raises(ResourceError) as info:
        manager.load("ghost", ResourceType.TEXTURE, tmp_path / "nope.png")
    assert info.value.resource_id == "ghost"
    assert manager.exists("ghost", ResourceType.TEXTURE) is False


def test_failed_reload_removes_previous(image_path, tmp_path):
    manager = ResourceManager()
    manager.load("wall", ResourceType.TEXTURE, image_path)
    with pytest.raises(ResourceError):
        manager.load("wall", ResourceType.TEXTURE, tmp_path / "missing.png")
    assert manager.exists("wall", ResourceType.TEXTURE) is False


def test_acquire_and_release_texture(image_path):
    manager = ResourceManager()
    manager.load("wall", ResourceType.TEXTURE, image_path)
    first = manager.acquire_texture("wall")
    second = manager.acquire_texture("wall")
    assert first is second
    assert first.ref_count == 2
    manager.release_texture(first)
    assert manager.exists("wall", ResourceType.TEXTURE) is True
    manager.release_texture(first)
    assert manager.exists("wall", ResourceType.TEXTURE) is False
    assert manager.acquire_texture("wall") is None


def test_release_unacquired_raises(image_path):
    manager = ResourceManager()
    texture = manager.load("wall", ResourceType.TEXTURE, image_path)
    with pytest.raises(ValueError):
        manager.release_texture(texture)


def test_acquire_missing_returns_none():
    manager = ResourceManager()
    assert manager.acquire_font("absent") is None
    assert manager.acquire_texture("absent") is None


def test_font_load_acquire_and_measure():
    manager = ResourceManager()
    manager.load("menu", ResourceType.FONT, FONT_PATH)
    font = manager.acquire_font("menu")
    assert isinstance(font, Font)
    assert font.ref_count == 1
    short_width, _ = font.sized(48).size("New")
    long_width, _ = font.sized(48).size("New Game")
    assert long_width > short_width
    assert font.sized(48) is font.sized(48)
    manager.release_font(font)
    assert manager.exists("menu", ResourceType.FONT) is False


def test_font_rejects_non_positive_size():
    font = ResourceManager().load("menu", ResourceType.FONT, FONT_PATH)
    with pytest.raises(ValueError):
        font.sized(0)


def test_font_bad_file_raises(tmp_path):
    bogus = tmp_path / "bogus.otf"
    bogus.write_bytes(b"not a font")
    with pytest.raises(ResourceError):
        ResourceManager().load("menu", ResourceType.FONT, bogus)


def test_sound_holds_file_bytes(wav_path):
    sound = ResourceManager().load("beep", ResourceType.SOUND, wav_path)
    assert isinstance(sound, Sound)
    assert sound.data == wav_path.read_bytes()


def test_music_requires_existing_file(wav_path, tmp_path):
    manager = ResourceManager()
    music = manager.load("theme", ResourceType.MUSIC, wav_path)
    assert isinstance(music, Music)
    assert music.path == str(wav_path)
    with pytest.raises(ResourceError):
        manager.load("other", ResourceType.MUSIC, tmp_path / "none.ogg")


def test_document_lines(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    document = ResourceManager().load("notes", ResourceType.DOCUMENT, path)
    assert isinstance(document, Document)
    assert document.contents == ["first", "second"]


def test_document_load_from_file_missing(tmp_path):
    with pytest.raises(OSError):
        Document().load_from_file(tmp_path / "missing.txt")