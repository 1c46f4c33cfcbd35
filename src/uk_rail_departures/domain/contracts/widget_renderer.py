"""Protocol for rendering a widget view."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uk_rail_departures.domain.models.widget_view import WidgetView


class WidgetRendererProtocol(Protocol):
    """Protocol for turning a widget view into markup."""

    def render(self, view: "WidgetView") -> str:
        """Render a widget view.

        Args:
            view: The widget's render model.

        Returns:
            The rendered markup.
        """
        ...
