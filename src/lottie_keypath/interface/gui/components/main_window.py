from __future__ import annotations

"""
Main Application Window.

Single-screen CustomTkinter window: a file picker row, a Lookup button and a
read-only monospaced box holding the rendered KeyPath tree.
"""

import os
from tkinter import filedialog
from typing import Any, Callable, Optional

import customtkinter as ctk

WINDOW_TITLE = "Lottie KeyPath Lookup"


class KeyPathWindow(ctk.CTk):
    """
    Root window of the KeyPath viewer.

    The Lookup button callback is attached later through ``bind_lookup`` so
    the controller can be built after the view.
    """

    def __init__(self, **kwargs: Any):
        ctk.set_appearance_mode("System")
        ctk.set_default_color_theme("blue")
        super().__init__(**kwargs)

        self.title(WINDOW_TITLE)
        self.geometry("720x640")
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._selected_path: Optional[str] = None

        # --- Input Row ---
        self.btn_browse = ctk.CTkButton(self, text="Choose File...", command=self._browse)
        self.btn_browse.grid(row=0, column=0, padx=10, pady=10)

        self.lbl_path = ctk.CTkLabel(self, text="No file selected", anchor="w")
        self.lbl_path.grid(row=0, column=1, padx=10, pady=10, sticky="ew")

        self.btn_lookup = ctk.CTkButton(self, text="Lookup")
        self.btn_lookup.grid(row=0, column=2, padx=10, pady=10)

        # --- Result Area ---
        self.textbox = ctk.CTkTextbox(self, state="disabled", font=("Consolas", 12))
        self.textbox.grid(row=1, column=0, columnspan=3, padx=10, pady=(0, 10), sticky="nsew")

    @property
    def selected_path(self) -> Optional[str]:
        return self._selected_path

    def bind_lookup(self, callback: Callable[[], None]) -> None:
        self.btn_lookup.configure(command=callback)

    def show_result(self, text: str) -> None:
        """Replace the result box content, keeping it read-only."""
        self.textbox.configure(state="normal")
        self.textbox.delete("1.0", "end")
        self.textbox.insert("1.0", text)
        self.textbox.configure(state="disabled")

    def _browse(self) -> None:
        path = filedialog.askopenfilename(
            title="Select a Lottie animation",
            filetypes=[("Lottie JSON", "*.json"), ("All files", "*.*")],
        )
        if path:
            self._selected_path = path
            self.lbl_path.configure(text=os.path.basename(path))
