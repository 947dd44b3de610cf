"""Top-level state machine and window loop."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable
from enum import Enum

import pygame

from .consts import SCREEN_HEIGHT, SCREEN_WIDTH, Key
from .game import Game, GameResult
from .menu import Menu, MenuChoice

_KEYMAP = {
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_p: Key.P,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_SPACE: Key.SPACE,
}

_PAUSE_KEYS = {Key.P, Key.ESCAPE}
_CONFIRM_KEYS = {Key.ENTER, Key.SPACE}


class GameState(Enum):
    """Which screen is active."""

    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class App:
    """Moves between the menu, a running match, the pause screen and the win screen."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.state = GameState.MENU
        self.menu = Menu(self._rng)
        self.game: Game | None = None
        self.left_won = False

    def step(self, dt: float, pressed: Iterable[Key], held: Iterable[Key] = ()) -> GameState:
        """Advance one frame with the keys pressed this frame and those held down."""
        pressed = set(pressed)

        if self.state is GameState.MENU:
            choice = self.menu.update(dt, pressed)
            if choice is not MenuChoice.NONE:
                self.game = Game(choice is MenuChoice.TWO_PLAYERS, self._rng)
                self.state = GameState.PLAYING
        elif self.game is None:
            pass
        elif self.state is GameState.PLAYING:
            if pressed & _PAUSE_KEYS:
                self.state = GameState.PAUSED
            else:
                result = self.game.update(dt, held)
                if result is not GameResult.CONTINUE:
                    self.left_won = result is GameResult.LEFT_WINS
                    self.state = GameState.GAME_OVER
        elif self.state is GameState.PAUSED:
            if pressed & _PAUSE_KEYS:
                self.state = GameState.PLAYING
        elif self.state is GameState.GAME_OVER:
            if pressed & _CONFIRM_KEYS:
                self.state = GameState.MENU
                self.game = None
                self.menu = Menu(self._rng)

        return self.state

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill((0, 0, 0))
        if self.state is GameState.MENU:
            self.menu.draw(surface)
            return
        if self.game is None:
            return
        self.game.draw(surface)
        if self.state is GameState.PAUSED:
            self.game.draw_pause_screen(surface)
        elif self.state is GameState.GAME_OVER:
            self.game.draw_win_screen(surface, self.left_won)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="prismpong", description="Colourful pong for one or two players.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(SCREEN_WIDTH), int(SCREEN_HEIGHT)))
        pygame.display.set_caption("Colorful Pong")
        clock = pygame.time.Clock()
        app = App()
        running = True
        while running:
            dt = clock.tick(60) / 1000.0
            pressed = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in _KEYMAP:
                    pressed.add(_KEYMAP[event.key])
            down = pygame.key.get_pressed()
            held = {key for code, key in _KEYMAP.items() if down[code]}
            app.step(dt, pressed, held)
            app.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())