"""Coordinate popup and bottom status bar."""
from __future__ import annotations

import pygame

from flight_reveal import Popup
from flight_reveal.popup import TITLE

from ui.constants import (
    POPUP_BG,
    POPUP_BORDER,
    POPUP_TEXT,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)
from ui.map_view import MapView


def draw_popup(
    surface: pygame.Surface, font: pygame.font.Font, view: MapView, popup: Popup
) -> pygame.Rect | None:
    """Draw the popup above its anchor. Returns the close button rect."""
    if popup.position is None:
        return None

    ax, ay = view.to_screen(*popup.position)
    title = font.render(TITLE, True, POPUP_TEXT)
    body = font.render(popup.text, True, POPUP_TEXT)

    pad = 8
    w = max(title.get_width(), body.get_width()) + pad * 2 + 14
    h = title.get_height() + body.get_height() + pad * 3
    box = pygame.Rect(int(ax) - w // 2, int(ay) - h - 12, w, h)

    pygame.draw.rect(surface, POPUP_BG, box, border_radius=6)
    pygame.draw.rect(surface, POPUP_BORDER, box, 1, border_radius=6)
    pygame.draw.polygon(
        surface, POPUP_BG, [(ax - 8, box.bottom - 1), (ax + 8, box.bottom - 1), (ax, ay)]
    )
    surface.blit(title, (box.x + pad, box.y + pad))
    surface.blit(body, (box.x + pad, box.y + pad * 2 + title.get_height()))

    closer = font.render("x", True, POPUP_TEXT)
    closer_rect = closer.get_rect(topright=(box.right - 6, box.y + 4))
    surface.blit(closer, closer_rect)
    return closer_rect.inflate(6, 6)


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    active: int,
    settled: int,
    pending: int,
) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    stats = font.render(
        f"Animating: {active}  Done: {settled}  Queued: {pending}", True, TEXT_COLOR
    )
    surface.blit(stats, (8, y + STATUS_H // 2 - stats.get_height() // 2))

    keys = font.render("[Drag] Pan  [Wheel] Zoom  [Click] Inspect  [R] Reload  [Esc] Quit", True, TEXT_DIM)
    surface.blit(keys, (SCREEN_W - keys.get_width() - 8, y + STATUS_H // 2 - keys.get_height() // 2))
