#!/usr/bin/env python3
import argparse
import logging
import random
import sys

import pygame

from pivotsort import settings, trace
from pivotsort.errors import PivotSortError

logger = logging.getLogger(__name__)

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================

def value_to_color(value, max_value):
    r = value / max_value
    if r < 0.25: return (0, int(255 * r * 4), 255)
    if r < 0.5:  return (0, 255, int(255 * (1 - (r - 0.25) * 4)))
    if r < 0.75: return (int(255 * (r - 0.5) * 4), 255, 0)
    return (255, int(255 * (1 - (r - 0.75) * 4)), 0)


def build_font(size=18):
    for name in ("consolas", "couriernew", "lucidaconsole"):
        try:
            return pygame.font.SysFont(name, size)
        except (OSError, pygame.error):
            continue
    return pygame.font.Font(None, size)


def draw_bars(screen, array, active_indices, label="", cfg=None):
    cfg = cfg or settings.defaults()
    width, height = screen.get_size()
    screen.fill(cfg["background_color"])
    n = len(array)
    if n:
        bw = width / n
        top = max(array) or 1
        for i, v in enumerate(array):
            h = (v / top) * (height - 60)
            c = cfg["active_color"] if i in active_indices else value_to_color(v, top)
            pygame.draw.rect(screen, c, (i * bw, height - h, max(1, bw - cfg["bar_spacing"]), h))
    if label:
        screen.blit(build_font().render(label, True, cfg["label_color"]), (12, 10))
    pygame.display.flip()

# ============================================================
# ========================= MAIN =============================
# ============================================================

def run_sort(screen, cfg):
    """Animate one shuffled run. Returns False once the user asks to stop."""
    arr = list(range(1, cfg["size"] + 1)); random.shuffle(arr)
    gen = trace.sort(arr)
    clock = pygame.time.Clock(); label = trace.NAME
    steps = 0

    while True:
        clock.tick(cfg["fps"] * cfg["speed"])
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT: return False
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE: return False
        try:
            state, active = next(gen)
            steps += 1
            draw_bars(screen, state, active, label, cfg)
        except StopIteration:
            logger.info("sorted %d elements in %d swaps", len(arr), steps)
            draw_bars(screen, arr, [], label + "  [SORTED]", cfg)
            pygame.time.wait(cfg["hold_ms"])
            return True


def build_parser():
    p = argparse.ArgumentParser(
        prog="pivotsort-visualize",
        description="Watch the median-of-three partition sort swap bars into place.",
    )
    p.add_argument("--size", type=int, default=64, help="number of bars")
    p.add_argument("--speed", type=float, default=1.0, help="frame rate multiplier")
    p.add_argument("--once", action="store_true", help="exit after one run")
    p.add_argument("--settings", help="settings JSON file")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        cfg = settings.load_settings(args.settings)
    except PivotSortError as e:
        logger.error("%s", e)
        return 1

    cfg.update(
        size=max(2, min(args.size, cfg["max_array_size"])),
        speed=max(0.05, args.speed),
        hold_ms=1800,
    )

    pygame.init()
    screen = pygame.display.set_mode((cfg["window_width"], cfg["window_height"]))
    pygame.display.set_caption("pivotsort")
    try:
        while run_sort(screen, cfg) and not args.once:
            pass
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
