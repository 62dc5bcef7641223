import logging
import tkinter as tk
from collections.abc import Callable
from typing import Any

from batched_subscribe.batching import IdleBatch
from batched_subscribe.config import config
from batched_subscribe.enhancer import batched_subscribe

log = logging.getLogger(__name__)


class CounterStore:
    """A minimal reducer-style store holding a single integer."""

    def __init__(self, count: int = 0) -> None:
        self.count = count
        self.dispatch_count = 0
        self._listeners: list[Callable[[], None]] = []

    def get_state(self) -> int:
        return self.count

    def dispatch(self, action: dict[str, Any]) -> dict[str, Any]:
        kind = action["type"]
        if kind == "increment":
            self.count += action.get("by", 1)
        elif kind == "reset":
            self.count = 0
        else:
            raise ValueError(f"Unknown action type: {kind!r}")

        self.dispatch_count += 1
        for listener in list(self._listeners):
            listener()
        return action

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)


class App(tk.Tk):
    def __init__(self):
        super().__init__()

        # Log exceptions
        self.report_callback_exception = lambda *args: log.error("", exc_info=args)

        self.batch = IdleBatch(self)
        self.store = batched_subscribe(self.batch)(CounterStore)()
        self.renders = 0
        self.immediate_renders = 0

        self.write_config_timer = None

        # Widgets
        buttons = tk.Frame(self)
        button1 = tk.Button(buttons, text="+1", command=lambda: self.increment(1))
        button2 = tk.Button(buttons, text="+1 x100", command=lambda: self.increment(100))
        button3 = tk.Button(buttons, text="Reset", command=self.reset)
        self.count_label = tk.Label(self, anchor=tk.W)
        self.batched_label = tk.Label(self, anchor=tk.W)
        self.immediate_label = tk.Label(self, anchor=tk.W)

        # Layout
        button1.pack(side=tk.LEFT)
        button2.pack(side=tk.LEFT)
        button3.pack(side=tk.LEFT)

        buttons.grid(row=0, sticky="W")
        self.count_label.grid(row=1, sticky="EW")
        self.batched_label.grid(row=2, sticky="EW")
        self.immediate_label.grid(row=3, sticky="EW")

        self.columnconfigure(0, weight=1)

        # Apply config state
        if config.window_geometry:
            self.geometry(config.window_geometry)

        # Callbacks
        self.store.subscribe(self.on_store_change)
        self.store.subscribe_immediate(self.on_store_change_immediate)
        self.bind("<Configure>", self.on_configure)
        self.bind("<Escape>", lambda e: self.destroy())

        self.title("Batched subscribe")
        self.render()

    def write_config_soon(self) -> None:
        """Schedule writing the config file, debouncing quick changes."""

        if self.write_config_timer is not None:
            self.after_cancel(self.write_config_timer)

        self.write_config_timer = self.after(ms=1000, func=config.write)

    def on_configure(self, event: tk.Event) -> None:
        if event.widget is not self:
            return

        geometry = self.geometry()
        if config.window_geometry != geometry:
            config.window_geometry = geometry
            self.write_config_soon()

    def increment(self, times: int) -> None:
        for _ in range(times):
            self.store.dispatch({"type": "increment"})

    def reset(self) -> None:
        self.store.dispatch({"type": "reset"})

    def on_store_change(self) -> None:
        self.renders += 1
        self.render()

    def on_store_change_immediate(self) -> None:
        self.immediate_renders += 1

    def render(self) -> None:
        self.count_label.config(text=f"Count: {self.store.get_state()}")
        self.batched_label.config(
            text=f"Dispatches: {self.store.dispatch_count}  Batched renders: {self.renders}"
        )
        self.immediate_label.config(
            text=f"Unbatched notifications: {self.immediate_renders}"
        )

    def destroy(self) -> None:
        self.batch.cancel()
        super().destroy()
