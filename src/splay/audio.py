"""Built-in playback backend using sounddevice and soundfile.

Uses ALSA directly via PortAudio, no external player needed.  Playback
blocks until the file has been streamed completely.
"""

from __future__ import annotations

import logging
from pathlib import Path

import sounddevice as sd
import soundfile as sf

from splay.player import PlaybackError

logger = logging.getLogger(__name__)

# Number of frames to read per chunk during streaming playback.
_BLOCK_SIZE = 2048


class AudioPlayer:
    """Streams audio files through ALSA via sounddevice."""

    def play(self, file_path: Path) -> None:
        """Play *file_path* from the beginning and return when it ends."""
        logger.debug("Streaming %s", file_path)
        try:
            with sf.SoundFile(str(file_path)) as f:
                stream = sd.OutputStream(
                    samplerate=f.samplerate,
                    channels=f.channels,
                    dtype="float32",
                )
                stream.start()
                try:
                    while True:
                        data = f.read(_BLOCK_SIZE, dtype="float32")
                        if len(data) == 0:
                            break
                        stream.write(data)
                finally:
                    stream.stop()
                    stream.close()
        except (sf.LibsndfileError, sd.PortAudioError, OSError) as exc:
            raise PlaybackError(f"Cannot play {file_path}: {exc}") from exc
