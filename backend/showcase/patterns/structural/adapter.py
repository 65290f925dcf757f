"""
Adapter: let an ``AudioPlayer`` that only understands mp3 play vlc and mp4
files through the ``AdvancedMediaPlayer`` interface.
"""

from abc import ABC, abstractmethod
from typing import List


class MediaPlayer(ABC):
    @abstractmethod
    def play(self, audio_type: str, filename: str) -> str: ...


class AdvancedMediaPlayer(ABC):
    @abstractmethod
    def play_vlc(self, filename: str) -> str: ...

    @abstractmethod
    def play_mp4(self, filename: str) -> str: ...


class VLCPlayer(AdvancedMediaPlayer):
    def play_vlc(self, filename: str) -> str:
        return f"Playing vlc file: {filename}"

    def play_mp4(self, filename: str) -> str:
        raise ValueError("VLC player cannot play mp4")


class MP4Player(AdvancedMediaPlayer):
    def play_vlc(self, filename: str) -> str:
        raise ValueError("MP4 player cannot play vlc")

    def play_mp4(self, filename: str) -> str:
        return f"Playing mp4 file: {filename}"


class MediaAdapter(MediaPlayer):
    def __init__(self, audio_type: str):
        if audio_type == "vlc":
            self.player: AdvancedMediaPlayer = VLCPlayer()
        elif audio_type == "mp4":
            self.player = MP4Player()
        else:
            raise ValueError(f"unsupported media format: {audio_type}")

    def play(self, audio_type: str, filename: str) -> str:
        if audio_type == "vlc":
            return self.player.play_vlc(filename)
        if audio_type == "mp4":
            return self.player.play_mp4(filename)
        raise ValueError(f"unsupported media format: {audio_type}")


class AudioPlayer(MediaPlayer):
    def play(self, audio_type: str, filename: str) -> str:
        if audio_type == "mp3":
            return f"Playing mp3 file: {filename}"
        return MediaAdapter(audio_type).play(audio_type, filename)


def demo() -> List[str]:
    player = AudioPlayer()
    lines = ["Adapter:"]
    for audio_type, filename in (("mp3", "song.mp3"), ("mp4", "movie.mp4"), ("vlc", "clip.vlc")):
        lines.append(f"  {player.play(audio_type, filename)}")
    try:
        player.play("avi", "film.avi")
    except ValueError as e:
        lines.append(f"  {e}")
    return lines
