"""Click-to-inspect coordinate popup."""

from __future__ import annotations

from flight_reveal.events import MOVESTART, SINGLECLICK, ListenerKey, MapEvent, MapEvents
from flight_reveal.projection import to_lon_lat, to_string_hdms
from flight_reveal.types import Coordinate

TITLE = "You clicked here:"


class Popup:
    """Show/hide state of a popup anchored at a map coordinate."""

    def __init__(self) -> None:
        self.position: Coordinate | None = None
        self.text: str = ""

    @property
    def visible(self) -> bool:
        return self.position is not None

    def show(self, coordinate: Coordinate) -> None:
        self.text = to_string_hdms(to_lon_lat(coordinate))
        self.position = coordinate

    def hide(self) -> None:
        self.position = None

    def close(self) -> bool:
        """Close-control handler. Returns False so hosts skip default handling."""
        self.hide()
        return False


def bind_popup(events: MapEvents, popup: Popup) -> list[ListenerKey]:
    """Show ``popup`` on single clicks and hide it when the map starts moving."""

    def on_click(event: MapEvent) -> None:
        if event.coordinate is not None:
            popup.show(event.coordinate)

    def on_movestart(event: MapEvent) -> None:
        popup.hide()

    return [events.on(SINGLECLICK, on_click), events.on(MOVESTART, on_movestart)]
