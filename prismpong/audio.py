"""Background music state and sound-effect cues."""

from __future__ import annotations


class AudioSystem:
    """Tracks which music loop is active and which sound cues were requested."""

    def __init__(self) -> None:
        self.menu_playing = False
        self.game_playing = False
        self.cues: list[str] = []

    def update_menu(self, dt: float) -> None:
        self.menu_playing = True

    def update_game(self, dt: float) -> None:
        if not self.game_playing:
            self.game_playing = True
            self.menu_playing = False

    def play_hit_sound(self) -> None:
        self.cues.append("hit")

    def play_select_sound(self) -> None:
        self.cues.append("select")

    def play_score_sound(self) -> None:
        self.cues.append("score")

    def stop(self) -> None:
        self.menu_playing = False
        self.game_playing = False
        self.cues.clear()