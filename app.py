from __future__ import annotations

import random
import tkinter as tk
from typing import Optional, Tuple

import config
from canvas_view import CanvasView
from engine import SceneEngine
from model import Variant


class ShapeApp:
    def __init__(self, surface_size: Tuple[int, int] = config.DEFAULT_SURFACE_SIZE, seed: Optional[int] = None) -> None:
        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.configure(bg=config.THEME["bg"])
        width, height = surface_size
        self.root.geometry(f"{width}x{height}")

        self.engine = SceneEngine(surface_size=surface_size, rng=random.Random(seed))
        self._color_rng = random.Random(seed)

        self._build_layout()
        self._update_status()

    def run(self) -> None:
        self.root.mainloop()

    def _build_layout(self) -> None:
        self.main_frame = tk.Frame(self.root, bg=config.THEME["bg"])
        self.main_frame.pack(fill=tk.BOTH, expand=True)

        self.main_frame.columnconfigure(0, weight=0)
        self.main_frame.columnconfigure(1, weight=1)
        self.main_frame.rowconfigure(0, weight=1)

        self.toolbar_frame = tk.Frame(self.main_frame, bg=config.THEME["panel"], padx=10, pady=10)
        self.toolbar_frame.grid(row=0, column=0, sticky="ns")

        self.canvas_frame = tk.Frame(self.main_frame, bg=config.THEME["bg"])
        self.canvas_frame.grid(row=0, column=1, sticky="nsew")
        self.canvas_frame.rowconfigure(0, weight=1)
        self.canvas_frame.columnconfigure(0, weight=1)

        self.canvas_view = CanvasView(self.canvas_frame, self.engine, on_view_changed=self._update_status, rng=self._color_rng)
        self.canvas_view.canvas.grid(row=0, column=0, sticky="nsew")

        self._build_toolbar()
        self._build_status_bar()

    def _build_toolbar(self) -> None:
        header = tk.Label(self.toolbar_frame, text="Shapes", bg=config.THEME["panel"], fg=config.THEME["text"], font=("Segoe UI", 12, "bold"))
        header.pack(anchor="w", pady=(0, 10))

        button_specs = [
            ("+ Create Cube", Variant.RECTANGULAR),
            ("+ Create Sphere", Variant.ROUND),
        ]
        for label, variant in button_specs:
            button = tk.Button(
                self.toolbar_frame,
                text=label,
                command=lambda v=variant: self.engine.create_entity(v),
                bg=config.THEME["panel_alt"],
                fg=config.THEME["text"],
                activebackground=config.THEME["accent"],
                activeforeground=config.THEME["text"],
                relief=tk.FLAT,
                width=16,
                pady=4,
            )
            button.pack(fill=tk.X, pady=4)

        sep = tk.Frame(self.toolbar_frame, bg=config.THEME["panel_alt"], height=2)
        sep.pack(fill=tk.X, pady=8)

        instructions = tk.Label(
            self.toolbar_frame,
            text=config.INSTRUCTIONS,
            justify=tk.LEFT,
            anchor="w",
            bg=config.THEME["panel"],
            fg=config.THEME["muted"],
        )
        instructions.pack(fill=tk.X)

    def _build_status_bar(self) -> None:
        self.status_var = tk.StringVar(value="")
        status = tk.Label(self.root, textvariable=self.status_var, bg=config.THEME["panel_alt"], fg=config.THEME["muted"], anchor="w")
        status.pack(fill=tk.X, side=tk.BOTTOM)

    def _update_status(self) -> None:
        selection = self.engine.selection
        if selection.multi:
            selected = f"{len(selection.multi)} in group"
        elif selection.active is not None:
            selected = "1 active"
        else:
            selected = "none"
        removing = len(self.engine.removal.pending_ids)
        self.status_var.set(
            f"Shapes: {len(self.engine.scene.live_entities())}  |  Removing: {removing}  |  Selected: {selected}  |  Mode: {self.engine.state.value}"
        )


def run_app(surface_size: Tuple[int, int] = config.DEFAULT_SURFACE_SIZE, seed: Optional[int] = None) -> None:
    app = ShapeApp(surface_size=surface_size, seed=seed)
    app.run()
