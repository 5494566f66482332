"""Status bar showing the last update time and keyboard hints."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from .weather_panel import escape_markup


class StatusBar(Horizontal):
    """Bottom status bar with clock, last update and keyboard hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
        dock: bottom;
    }

    StatusBar #status-time {
        width: auto;
    }

    StatusBar #status-refresh {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-spacer {
        width: 1fr;
    }

    StatusBar #status-hints {
        width: auto;
        text-align: right;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._last_refresh: datetime | None = None
        self._last_city: str = ""

    def compose(self) -> ComposeResult:
        yield Static("", id="status-time")
        yield Static("", id="status-refresh")
        yield Static("", id="status-spacer")
        yield Static(
            "[dim]enter[/dim] Найти  [dim]r[/dim] Обновить  [dim]q[/dim] Выход",
            id="status-hints",
        )

    def on_mount(self) -> None:
        """Start clock update timer."""
        self.set_interval(1, self._update_time)
        self._update_time()

    def _update_time(self) -> None:
        """Update the clock and the relative refresh time."""
        now = datetime.now()
        self.query_one("#status-time", Static).update(f"[bold]{now.strftime('%H:%M:%S')}[/bold]")

        if self._last_refresh:
            minutes = int((now - self._last_refresh).total_seconds() // 60)
            if minutes == 0:
                refresh_text = f"{self._last_city}: обновлено только что"
            else:
                refresh_text = f"{self._last_city}: обновлено {minutes} мин назад"
            self.query_one("#status-refresh", Static).update(f"[dim]{refresh_text}[/dim]")

    def set_last_refresh(self, city: str, time: datetime | None = None) -> None:
        """Record a successful update for ``city``."""
        self._last_city = escape_markup(city)
        self._last_refresh = time or datetime.now()
        self._update_time()
