"""Interactive window: keyboard handling, frame rendering and the entry point."""

from __future__ import annotations

import sys
from collections.abc import Collection, Sequence

import pygame

from .config import HEIGHT, WIDTH, MapConfig, MapError
from .parser import check_args, parse_map
from .raycast import (
    MOVE_STEP,
    ROTATION_STEP,
    move_player,
    player_position,
    wall_spans,
)

TITLE = "Cub3D"
BACKGROUND_COLOR = (0, 0, 0)
WALL_COLOR = (0xFF, 0xA5, 0x2A)
FRAME_RATE = 60

_WATCHED_KEYS = (
    pygame.K_ESCAPE,
    pygame.K_w,
    pygame.K_s,
    pygame.K_a,
    pygame.K_d,
)


class Game:
    """A running scene: the parsed configuration, its grid and the player."""

    def __init__(self, config: MapConfig) -> None:
        if config.grid is None:
            raise MapError("Map is empty")
        self.config = config
        self.grid: list[str] = list(config.grid)
        self.player = player_position(self.grid)

    def handle_input(self, keys: Collection[int]) -> bool:
        """Apply the pressed keys to the player; return False once Escape is pressed."""
        running = pygame.K_ESCAPE not in keys
        if pygame.K_w in keys:
            move_player(self.grid, self.player, MOVE_STEP, 1)
        if pygame.K_s in keys:
            move_player(self.grid, self.player, MOVE_STEP, -1)
        if pygame.K_a in keys:
            self.player.angle -= ROTATION_STEP
        if pygame.K_d in keys:
            self.player.angle += ROTATION_STEP
        return running

    def render(self, surface: pygame.Surface) -> None:
        """Clear ``surface`` and draw one wall slice per screen column."""
        surface.fill(BACKGROUND_COLOR)
        for column, (start, end) in enumerate(wall_spans(self.grid, self.player)):
            if end > start:
                surface.fill(WALL_COLOR, pygame.Rect(column, start, 1, end - start))

    def run(self) -> None:
        """Open the window and run the frame loop until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                pressed = pygame.key.get_pressed()
                keys = {key for key in _WATCHED_KEYS if pressed[key]}
                if not self.handle_input(keys):
                    running = False
                self.render(screen)
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the scene named on the command line and show it; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_args(args)
        config = parse_map(path)
    except MapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(config.describe())
    print("map:")
    try:
        Game(config).run()
    except (MapError, pygame.error) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0