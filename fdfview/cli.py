"""Command-line entry point: load a map, render its wireframe and show it."""

from __future__ import annotations

import os
import sys
from typing import List, Optional

from fdfview.drawing import Canvas, connect_points
from fdfview.model import HeightMap
from fdfview.parsing import MapError, load_map
from fdfview.transform import fit_to_image, shift_top_left, to_isometric

IMAGE_WIDTH = 1600
IMAGE_HEIGHT = 1000
MARGIN = 15
BACKGROUND = 0x000000FF
TITLE = "FdF"


def prepare_map(hmap: HeightMap, width: int, height: int, margin: int) -> HeightMap:
    """Project the map isometrically and place it inside the image margins."""
    hmap.flatten(1)
    to_isometric(hmap)
    fit_to_image(hmap, width - margin * 2, height - margin * 2)
    shift_top_left(hmap, margin, margin)
    return hmap


def render(
    hmap: HeightMap,
    width: int = IMAGE_WIDTH,
    height: int = IMAGE_HEIGHT,
    margin: int = MARGIN,
) -> Canvas:
    """Draw the map's wireframe on a black canvas of the given size."""
    prepare_map(hmap, width, height, margin)
    canvas = Canvas(width, height)
    canvas.fill(BACKGROUND)
    connect_points(hmap, canvas)
    return canvas


def show(canvas: Canvas) -> None:
    """Display the canvas in a window until it is closed or Escape is pressed.

    Raises RuntimeError when no window can be opened.
    """
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((canvas.width, canvas.height), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        image = pygame.image.frombuffer(bytes(canvas.data), (canvas.width, canvas.height), "RGBA")
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if pygame.key.get_pressed()[pygame.K_ESCAPE]:
                running = False
            screen.blit(image, (0, 0))
            pygame.display.flip()
            clock.tick(60)
    except pygame.error as exc:
        raise RuntimeError(f"cannot display the image: {exc}") from exc
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the viewer on the one map file named in ``argv``; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Error: Filename missing")
        return 1
    if len(args) > 1:
        print("Error: Too many arguments")
        return 1
    try:
        hmap = load_map(args[0])
    except OSError:
        print("Error: Could not open file")
        return 1
    except MapError:
        print("Error: failed to read file")
        return 1
    if hmap.cols == 0:
        print("Error: failed to read file")
        return 1
    canvas = render(hmap)
    try:
        show(canvas)
    except RuntimeError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())