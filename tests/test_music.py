import pygame

from lanerush.music import AudioController


def test_missing_files_are_silent_noops(tmp_path):
    ac = AudioController(music_path=str(tmp_path / "nope.ogg"), crash_path=None)
    assert ac.music_ok is False
    assert ac.crash is None
    ac.play()
    ac.play_crash()
    ac.pause()
    assert ac.paused


def test_toggle_flips_paused():
    ac = AudioController()
    assert ac.paused
    ac.toggle()
    assert not ac.paused
    ac.toggle()
    assert ac.paused


def test_blocked_playback_is_swallowed(monkeypatch):
    ac = AudioController()
    ac.music_ok = True

    def boom(*args, **kwargs):
        raise pygame.error("playback blocked")

    monkeypatch.setattr(pygame.mixer.music, "play", boom)
    monkeypatch.setattr(pygame.mixer.music, "pause", boom)
    ac.play()
    ac.pause()
    assert ac.paused


def test_volumes_are_clamped():
    ac = AudioController(music_volume=3, sfx_volume=-1)
    assert ac.music_volume == 1.0
    assert ac.sfx_volume == 0.0
