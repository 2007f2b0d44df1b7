"""Fire-and-forget sound playback from the assets directory."""

import os
import threading
import time
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

ASSETS_DIR = Path("assets")

_condition = threading.Condition()
_active_sounds = 0


def play_audio(filename):
    """Play ``filename`` from the assets directory, blocking until it ends.

    Returns True if the sound was played and False if there was nothing to play.
    """
    global _active_sounds
    if not filename:
        return False

    with _condition:
        _active_sounds += 1
    try:
        try:
            sound = pygame.mixer.Sound(str(ASSETS_DIR / filename))
        except (pygame.error, OSError):
            return False
        channel = sound.play()
        while channel is not None and channel.get_busy():
            time.sleep(0.01)
        return True
    finally:
        with _condition:
            _active_sounds -= 1
            _condition.notify_all()


def initialize_audio():
    """Start the audio mixer; failure leaves the game silent."""
    try:
        pygame.mixer.init()
    except pygame.error:
        pass


def cleanup_audio():
    """Wait for playing sounds to finish, then shut audio down."""
    with _condition:
        _condition.wait_for(lambda: _active_sounds == 0)
        pygame.mixer.quit()
        pygame.quit()