"""Flight Map — progressive great-circle flight path animation.

Exercises flight_reveal: staggered admission, per-frame reveal with
world-wrap duplication, and the click-to-inspect popup.

Controls:
  Drag    Pan (across the antimeridian as far as you like)
  Wheel   Zoom
  Click   Show the clicked coordinate
  R       Reload the dataset
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from flight_reveal import AnimationController, FrameState, MapEvents, Popup, bind_popup
from flight_reveal.dataset import load_flights
from flight_reveal.events import MOVESTART, SINGLECLICK

from ui.constants import BG_COLOR, FPS, INITIAL_RESOLUTION, SCREEN_H, SCREEN_W, ZOOM_STEP
from ui.layers import draw_commands, draw_graticule, draw_settled
from ui.map_view import MapView
from ui.overlay import draw_popup, draw_status_bar

DEFAULT_DATA = Path(__file__).parent / "data" / "flights.json"

logger = logging.getLogger("flight-map")


class MapState:
    """Holds the animation core, the view, and the popup."""

    def __init__(self, data_path: Path) -> None:
        self.data_path = data_path
        self.frame_requested = True
        self.controller = AnimationController(
            time_fn=lambda: float(pygame.time.get_ticks()),
            request_next_frame=self._request_frame,
        )
        self.view = MapView(center=(0.0, 0.0), resolution=INITIAL_RESOLUTION)
        self.events = MapEvents()
        self.popup = Popup()
        bind_popup(self.events, self.popup)
        self.closer_rect: pygame.Rect | None = None

        self.controller.on_finish(self._on_finish)

    def _request_frame(self) -> None:
        self.frame_requested = True

    def _on_finish(self, path, t: float) -> None:
        logger.debug("group %d segment finished at %.0f ms", path.group, t)

    def load(self) -> None:
        records = load_flights(self.data_path)
        self.controller.reset()
        self.controller.load(records)
        logger.info("loaded %d flights from %s", len(records), self.data_path)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--data", type=Path, default=DEFAULT_DATA, help="flights JSON file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Flight Map — flight_reveal demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = MapState(args.data)
    state.load()

    dragging = False
    moved = False
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    state.load()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                dragging = True
                moved = False

            elif event.type == pygame.MOUSEMOTION and dragging:
                dx, dy = event.rel
                if dx or dy:
                    if not moved:
                        state.events.publish(MOVESTART)
                        moved = True
                    state.view.pan(dx, dy)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                dragging = False
                if not moved:
                    if state.closer_rect is not None and state.closer_rect.collidepoint(event.pos):
                        state.popup.close()
                    else:
                        state.events.publish(
                            SINGLECLICK, coordinate=state.view.to_map(*event.pos)
                        )

            elif event.type == pygame.MOUSEWHEEL:
                state.events.publish(MOVESTART)
                state.view.zoom(1 / ZOOM_STEP if event.y > 0 else ZOOM_STEP)

        state.events.flush()

        if not state.frame_requested:
            continue
        state.frame_requested = False

        # --- Render ---
        world_width = state.controller.config.world_width
        frame = FrameState(
            time=float(pygame.time.get_ticks()),
            resolution=state.view.resolution,
            center=state.view.center,
        )

        screen.fill(BG_COLOR)
        draw_graticule(screen, state.view, world_width)
        draw_settled(screen, state.view, state.controller.settled(), world_width)
        draw_commands(screen, state.view, state.controller.tick(frame))
        state.closer_rect = draw_popup(screen, font, state.view, state.popup)
        draw_status_bar(
            screen,
            font,
            active=len(state.controller.active()),
            settled=len(state.controller.settled()),
            pending=state.controller.loader.pending,
        )

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
