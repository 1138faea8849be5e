"""Start-up and main loop: locate the art, open the window and play the game."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence, TypeVar, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from timber.branches import BRANCH_ORIGIN, NUM_BRANCHES, Side  # noqa: E402
from timber.game import Game, GameEvent  # noqa: E402
from timber.hud import (  # noqa: E402
    FPS_BACKGROUND_POSITION,
    FPS_BACKGROUND_SIZE,
    FPS_TEXT_POSITION,
    FPS_TEXT_SIZE,
    HUD_BACKGROUND_COLOUR,
    SCORE_BACKGROUND_POSITION,
    SCORE_BACKGROUND_SIZE,
    SCORE_TEXT_POSITION,
    SCORE_TEXT_SIZE,
)
from timber.world import SCREEN_HEIGHT, SCREEN_WIDTH  # noqa: E402

WINDOW_TITLE = "Timber!!!"
DEFAULT_ASSET_DIR = ".."
EXIT_FAILURE = 1

MESSAGE_TEXT_SIZE = 75
TREE_POSITION = (810.0, 0.0)
TIME_BAR_COLOUR = (255, 0, 0)
TEXT_COLOUR = (255, 255, 255)
BRANCH_UNPLACED = (-2000.0, -2000.0)

FONT_PATH = Path("fonts") / "KOMIKAP_.ttf"

T = TypeVar("T")


class AssetError(Exception):
    """A graphic, font or sound the game needs could not be found or loaded."""


@dataclass(frozen=True)
class Assets:
    """Paths of the files the game draws and plays.

    The player, gravestone, axe and log graphics are optional: when one is
    missing the game runs without drawing it.
    """

    root: Path
    background: Path
    tree: Path
    bee: Path
    cloud: Path
    font: Path
    branch: Path
    chop_sound: Path
    death_sound: Path
    out_of_time_sound: Path
    player: Optional[Path]
    rip: Optional[Path]
    axe: Optional[Path]
    log: Optional[Path]


_REQUIRED = (
    ("background", Path("graphics") / "background.png", "Error: Could not load background image!"),
    ("tree", Path("graphics") / "tree.png", "Error: Could not load tree image!"),
    ("bee", Path("graphics") / "bee.png", "Error: Could not load bee image!"),
    ("cloud", Path("graphics") / "cloud.png", "Error: Could not load cloud image!"),
    ("font", FONT_PATH, "Error: Could not load font!"),
    ("branch", Path("graphics") / "branch.png", "Error: Could not load branch image!"),
    ("chop_sound", Path("sound") / "chop.wav", "Error: Could not load chop sound!"),
    ("death_sound", Path("sound") / "death.wav", "Error: Could not load death sound!"),
    (
        "out_of_time_sound",
        Path("sound") / "out_of_time.wav",
        "Error: Could not load out of time sound!",
    ),
)

_OPTIONAL = (
    ("player", Path("graphics") / "player.png"),
    ("rip", Path("graphics") / "rip.png"),
    ("axe", Path("graphics") / "axe.png"),
    ("log", Path("graphics") / "log.png"),
)

_MESSAGES = {name: message for name, _, message in _REQUIRED}


def load_assets(root: Union[str, Path]) -> Assets:
    """Find the game's files under ``root``, raising :class:`AssetError` for a missing one."""
    base = Path(root)
    found: dict[str, Optional[Path]] = {}
    for name, relative, message in _REQUIRED:
        path = base / relative
        if not path.is_file():
            raise AssetError(message)
        found[name] = path
    for name, relative in _OPTIONAL:
        path = base / relative
        found[name] = path if path.is_file() else None
    return Assets(root=base, **found)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="timber", description="Chop the tree, dodge the branches.")
    parser.add_argument(
        "--assets",
        default=DEFAULT_ASSET_DIR,
        help="directory holding graphics/, fonts/ and sound/ (default: %(default)s)",
    )
    parser.add_argument(
        "--windowed",
        dest="fullscreen",
        action="store_false",
        help="play in a window instead of full screen",
    )
    return parser.parse_args(argv)


def _loaded(loader: Callable[[], T], message: str) -> T:
    try:
        return loader()
    except (pygame.error, OSError) as exc:
        raise AssetError(message) from exc


def _image(path: Path, message: str) -> pygame.Surface:
    return _loaded(lambda: pygame.image.load(str(path)).convert_alpha(), message)


def _optional_image(path: Optional[Path]) -> Optional[pygame.Surface]:
    if path is None:
        return None
    try:
        return pygame.image.load(str(path)).convert_alpha()
    except (pygame.error, OSError):
        return None


def _load_sounds(assets: Assets) -> dict[GameEvent, pygame.mixer.Sound]:
    try:
        pygame.mixer.init()
    except pygame.error:
        return {}
    files = {
        GameEvent.CHOP: ("chop_sound", assets.chop_sound),
        GameEvent.DEATH: ("death_sound", assets.death_sound),
        GameEvent.OUT_OF_TIME: ("out_of_time_sound", assets.out_of_time_sound),
    }
    return {
        event: _loaded(lambda p=path: pygame.mixer.Sound(str(p)), _MESSAGES[name])
        for event, (name, path) in files.items()
    }


def _hud_panel(size: tuple[float, float]) -> pygame.Surface:
    panel = pygame.Surface((int(size[0]), int(size[1])), pygame.SRCALPHA)
    panel.fill(HUD_BACKGROUND_COLOUR)
    return panel


class _Renderer:
    """Draws a game state onto the screen in back-to-front order."""

    def __init__(self, screen: pygame.Surface, assets: Assets) -> None:
        self.screen = screen
        self.background = _image(assets.background, _MESSAGES["background"])
        self.tree = _image(assets.tree, _MESSAGES["tree"])
        self.bee = _image(assets.bee, _MESSAGES["bee"])
        self.cloud = _image(assets.cloud, _MESSAGES["cloud"])
        self.branch = _image(assets.branch, _MESSAGES["branch"])
        self.player = _optional_image(assets.player)
        self.rip = _optional_image(assets.rip)
        self.axe = _optional_image(assets.axe)
        self.log = _optional_image(assets.log)
        self.message_font = _loaded(
            lambda: pygame.font.Font(str(assets.font), MESSAGE_TEXT_SIZE), _MESSAGES["font"]
        )
        self.score_font = _loaded(
            lambda: pygame.font.Font(str(assets.font), SCORE_TEXT_SIZE), _MESSAGES["font"]
        )
        self.fps_font = _loaded(
            lambda: pygame.font.Font(str(assets.font), FPS_TEXT_SIZE), _MESSAGES["font"]
        )
        self.score_panel = _hud_panel(SCORE_BACKGROUND_SIZE)
        self.fps_panel = _hud_panel(FPS_BACKGROUND_SIZE)
        self.branches_placed = False
        self._rotations = [0.0] * NUM_BRANCHES

    def _blit(self, image: Optional[pygame.Surface], position: tuple[float, float]) -> None:
        if image is not None:
            self.screen.blit(image, (round(position[0]), round(position[1])))

    def _draw_branches(self, game: Game) -> None:
        if not self.branches_placed:
            return
        width, height = self.branch.get_size()
        offset = pygame.math.Vector2(BRANCH_ORIGIN[0] - width / 2, BRANCH_ORIGIN[1] - height / 2)
        for index, placement in enumerate(game.branches.sprite_positions()):
            if placement.rotation is not None:
                self._rotations[index] = placement.rotation
            rotation = self._rotations[index]
            image = pygame.transform.rotate(self.branch, -rotation)
            centre = pygame.math.Vector2(placement.x, placement.y) - offset.rotate(rotation)
            self.screen.blit(image, image.get_rect(center=(round(centre.x), round(centre.y))))

    def _text(self, font: pygame.font.Font, text: str) -> pygame.Surface:
        return font.render(text, True, TEXT_COLOUR)

    def draw(self, game: Game) -> None:
        self.screen.fill((0, 0, 0))
        self._blit(self.background, (0.0, 0.0))
        self._blit(self.log, game.log.position)
        self._draw_branches(game)
        self._blit(self.tree, TREE_POSITION)
        for cloud in game.clouds:
            self._blit(self.cloud, (cloud.x, cloud.y))
        self._blit(self.bee, (game.bee.x, game.bee.y))
        self._blit(self.player, game.player_position)
        self._blit(self.axe, game.axe_position)
        self._blit(self.rip, game.rip_position)

        bar_x, bar_y = game.time_bar.position
        bar_width = max(0, round(game.time_bar_width()))
        pygame.draw.rect(
            self.screen,
            TIME_BAR_COLOUR,
            pygame.Rect(round(bar_x), round(bar_y), bar_width, round(game.time_bar.height)),
        )

        self._blit(self.score_panel, SCORE_BACKGROUND_POSITION)
        self._blit(self.fps_panel, FPS_BACKGROUND_POSITION)
        self._blit(self._text(self.score_font, game.score_text()), SCORE_TEXT_POSITION)
        self._blit(self._text(self.fps_font, game.fps.text()), FPS_TEXT_POSITION)

        if game.message_visible:
            message = self._text(self.message_font, game.message)
            self.screen.blit(
                message, message.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2))
            )


def _report(renderer: _Renderer, assets: Assets, game: Game) -> None:
    print(f"Screen size: {SCREEN_WIDTH}x{SCREEN_HEIGHT}")
    for label, image in (
        ("Background texture size", renderer.background),
        ("Tree texture size", renderer.tree),
        ("The bee size", renderer.bee),
        ("Cloud texture size", renderer.cloud),
    ):
        width, height = image.get_size()
        print(f"{label}: {width}x{height}")
    print(f"Font file path: {assets.font}")
    print(f"Message text: {game.message}")
    print(f"Message text position: ({SCREEN_WIDTH / 2:g}, {SCREEN_HEIGHT / 2:g})")
    print(f"Message text size: {MESSAGE_TEXT_SIZE}")
    print(f"Score text: {game.score_text()}")
    print(f"Score text position: ({SCORE_TEXT_POSITION[0]:g}, {SCORE_TEXT_POSITION[1]:g})")
    print(f"Score text size: {SCORE_TEXT_SIZE}")


def run(asset_dir: Union[str, Path] = DEFAULT_ASSET_DIR, fullscreen: bool = True) -> None:
    """Open the game window and play until it is closed or Escape is pressed."""
    assets = load_assets(asset_dir)
    pygame.init()
    try:
        flags = pygame.SCALED | (pygame.FULLSCREEN if fullscreen else 0)
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)
        pygame.display.set_caption(WINDOW_TITLE)

        renderer = _Renderer(screen, assets)
        sounds = _load_sounds(assets)
        game = Game()
        _report(renderer, assets, game)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                    game.press_enter()
                elif event.type == pygame.KEYUP and not game.paused:
                    game.key_released()
            if not running:
                break

            dt = clock.tick() / 1000.0
            happened: list[GameEvent] = []
            if not game.paused:
                renderer.branches_placed = True
                keys = pygame.key.get_pressed()
                if keys[pygame.K_RIGHT]:
                    happened += game.chop(Side.RIGHT)
                if keys[pygame.K_LEFT]:
                    happened += game.chop(Side.LEFT)
                happened += game.update(dt)

            for event in happened:
                sound = sounds.get(event)
                if sound is not None:
                    sound.play()

            renderer.draw(game)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game from the command line; return the process exit status."""
    args = parse_args(argv)
    try:
        run(args.assets, args.fullscreen)
    except AssetError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE
    return 0