"""HTML rendering of widget views."""

from markupsafe import Markup, escape

from uk_rail_departures.domain.contracts.widget_renderer import WidgetRendererProtocol
from uk_rail_departures.domain.models import Table, WidgetView

PAGE_STYLE = """
body { background: #000; color: #eee; font-family: "Roboto Condensed", sans-serif; }
.widget { margin: 1em; }
.header { font-size: 1.2em; border-bottom: 1px solid #666; margin-bottom: 0.3em; }
.dimmed { color: #999; }
.small { font-size: 0.9em; }
table.small td { padding: 0 0.6em 0 0; }
td.ontime { color: #8f8; }
td.late { color: #fc4; }
td.cancelled { color: #f66; text-decoration: line-through; }
"""


class WidgetHtmlRenderer(WidgetRendererProtocol):
    """Renders a widget view as an HTML fragment."""

    def render(self, view: WidgetView) -> str:
        parts = [Markup('<div class="widget" id="widget-{}">').format(view.widget_id)]
        if view.header:
            parts.append(Markup('<header class="header">{}</header>').format(view.header))

        if view.is_message:
            parts.append(
                Markup('<div class="{}">{}</div>').format(view.css_class, view.message or "")
            )
        else:
            parts.append(self.render_table(view.table))

        parts.append(Markup("</div>"))
        return str(Markup("").join(parts))

    @staticmethod
    def render_table(table: Table | None) -> Markup:
        if table is None:
            return Markup("")
        rows = []
        for row in table.rows:
            cells = Markup("").join(
                Markup('<td class="{}">{}</td>').format(cell.css_class, cell.text)
                for cell in row.cells
            )
            rows.append(Markup("<tr>{}</tr>").format(cells))
        return Markup('<table class="{}">{}</table>').format(table.css_class, Markup("").join(rows))

    def render_page(self, title: str, views: list[WidgetView], refresh_seconds: int) -> str:
        """Render a complete page holding every widget."""
        body = Markup("").join(Markup(self.render(view)) for view in views)
        return str(
            Markup(
                "<!DOCTYPE html>\n"
                '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
                '<meta http-equiv="refresh" content="{refresh}">\n'
                "<title>{title}</title>\n<style>{style}</style>\n</head>\n"
                "<body>\n<h1>{title}</h1>\n{body}\n</body>\n</html>\n"
            ).format(
                refresh=refresh_seconds,
                title=escape(title),
                style=Markup(PAGE_STYLE),
                body=body,
            )
        )
