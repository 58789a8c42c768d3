"""Window, input handling and main loop of the simulation."""

from __future__ import annotations

import argparse
import os
import time

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .board import Board  # noqa: E402
from .log import SET_CLEAR, get_commit_hash, log, log_exit  # noqa: E402
from .metrics import FrameMetrics  # noqa: E402

WINDOW_TITLE = "SDL2 cpu only GOL"
SCR_WIDTH = 800
SCR_HEIGHT = 600
MAX_FRAMES = 512
SCALING_FACTOR = 4

COMPUTE = "C"
RENDER = "C"
VER_MAJOR = 0
VER_MINOR = 1
PROG_NAME = f"{COMPUTE}{RENDER}_v{VER_MAJOR}.{VER_MINOR}"
PROG_DESCRIPTION = "Everything CPU, no bitpacking, extremely simple."

WHITE = (0xFF, 0xFF, 0xFF, 0xFF)
BLACK = (0x00, 0x00, 0x00, 0xFF)

_MOD_NAMES = (
    (pygame.KMOD_NUM, "NUMLOCK "),
    (pygame.KMOD_CAPS, "CAPSLOCK "),
    (pygame.KMOD_LCTRL, "LCTRL "),
    (pygame.KMOD_RCTRL, "RCTRL "),
    (pygame.KMOD_RSHIFT, "RSHIFT "),
    (pygame.KMOD_LSHIFT, "LSHIFT "),
    (pygame.KMOD_RALT, "RALT "),
    (pygame.KMOD_LALT, "LALT "),
    (pygame.KMOD_CTRL, "CTRL "),
    (pygame.KMOD_SHIFT, "SHIFT "),
    (pygame.KMOD_ALT, "ALT "),
)


def mod_to_str(mod: int) -> str:
    """Name of the first held modifier in priority order, or an empty string."""
    return next((name for flag, name in _MOD_NAMES if mod & flag), "")


def should_quit(key: int, mod: int) -> bool:
    """True for Escape, or for C while Ctrl is held."""
    if key == pygame.K_ESCAPE:
        return True
    if key in (ord("c"), ord("C")):
        return bool(mod & pygame.KMOD_CTRL)
    return False


def program_header(width: int, height: int, board: Board, commit: str | None) -> str:
    """The banner printed when the board is set up."""
    return (
        "\n"
        f"        name| {PROG_NAME}\n"
        f" description| {PROG_DESCRIPTION}\n"
        f"      commit| {commit or ''}\n\n"
        f"    win size| {width}x{height}\n"
        f"  board size| {board.cols}x{board.rows}\n"
        f"   cell size| {board.scaling_factor}x{board.scaling_factor}\n"
    )


def _sdl_failure(message: str, error: Exception) -> None:
    log(f"\n\033[31;1m[SDL ERROR] ->\033[0m \033[31m{message}: {error}{SET_CLEAR}")
    log_exit(1)


def _handle_input() -> bool:
    """Drain pending events; return False once the program should stop."""
    running = True
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN and should_quit(event.key, event.mod):
            running = False
    return running


def _draw(surface: pygame.Surface, board: Board) -> None:
    surface.fill(WHITE)
    size = board.scaling_factor
    for x, y in board.alive_cells():
        surface.fill(BLACK, pygame.Rect(x * size, y * size, size, size))
    pygame.display.flip()


def run(
    max_frames: int = MAX_FRAMES,
    scaling_factor: int = SCALING_FACTOR,
    width: int = SCR_WIDTH,
    height: int = SCR_HEIGHT,
) -> str:
    """Run the simulation in a window and return the summary report."""
    pygame.init()
    try:
        try:
            surface = pygame.display.set_mode((width, height))
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as exc:
            _sdl_failure("Failed to initialize window", exc)

        width, height = surface.get_size()
        board = Board.from_window(width, height, scaling_factor)
        log(program_header(width, height, board, get_commit_hash(7)))
        board.seed_checkerboard()
        metrics = FrameMetrics()

        start = time.perf_counter()
        frame_count = 0
        running = True
        while running:
            t0 = time.perf_counter()
            running = _handle_input()
            ms_input = (time.perf_counter() - t0) * 1000.0

            t0 = time.perf_counter()
            board.step()
            ms_update = (time.perf_counter() - t0) * 1000.0

            t0 = time.perf_counter()
            _draw(surface, board)
            ms_draw = (time.perf_counter() - t0) * 1000.0

            metrics.update(ms_input, ms_update, ms_draw)
            frame_count += 1
            if frame_count >= max_frames:
                break
        elapsed = time.perf_counter() - start

        report = metrics.report(frame_count, elapsed, board.population, board.generation)
        log(report)
        return report
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=PROG_DESCRIPTION)
    parser.add_argument("--frames", type=int, default=MAX_FRAMES)
    parser.add_argument("--scale", type=int, default=SCALING_FACTOR)
    parser.add_argument("--width", type=int, default=SCR_WIDTH)
    parser.add_argument("--height", type=int, default=SCR_HEIGHT)
    args = parser.parse_args(argv)
    run(args.frames, args.scale, args.width, args.height)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())