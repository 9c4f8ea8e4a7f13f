# app.py
# CustomTkinter GUI for the Autocomplete project (dark theme).
# - Load a records file (.json / .jsonl / .csv / text lines).
# - Background loading thread (keeps UI responsive).
# - Live search with debounce; results & event log panes.

from __future__ import annotations
import asyncio
import dataclasses
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from autocomplete import config as CFG
from autocomplete.engine import Engine
from autocomplete.loader import load_records_async
from autocomplete.models import Config, MatchEntry


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def by_score_desc(a: MatchEntry, b: MatchEntry) -> int:
    return (b.match.score - a.match.score) or (a.index - b.index)


# -------------------- main app --------------------

class AutocompleteApp(ctk.CTk):
    """Dark-themed GUI that loads a records file and queries the engine as you type."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Autocomplete Engine")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine = Engine(Config(sort=by_score_desc, max_results=10))
        self._loaded: bool = False
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None

        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)  # results
        self.grid_rowconfigure(3, weight=1)  # log

        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")

    # --------- UI sections ---------

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        bar.grid_columnconfigure(1, weight=1)

        ctk.CTkButton(bar, text="Open records…", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        self.lbl_source = ctk.CTkLabel(bar, text="No source selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(0, weight=1)

        self.entry_query = ctk.CTkEntry(box, placeholder_text="Start typing…")
        self.entry_query.grid(row=0, column=0, sticky="ew", padx=(12, 6), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

        self.entry_keys = ctk.CTkEntry(box, width=160, placeholder_text="keys (comma separated)")
        self.entry_keys.grid(row=0, column=1, padx=6, pady=10)
        self.entry_keys.bind("<KeyRelease>", self._on_options_changed)

        self.opt_mode = ctk.CTkOptionMenu(box, values=list(CFG.MODES), command=self._on_options_changed)
        self.opt_mode.set(CFG.SEARCH_MODE)
        self.opt_mode.grid(row=0, column=2, padx=(6, 12), pady=10)

    def _build_results(self) -> None:
        self.txt_results = ctk.CTkTextbox(self, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=2, column=0, sticky="nsew", padx=12, pady=6)
        self.txt_results.configure(state="disabled")
        self._set_results("(no results yet — open a records file and start typing)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready. Open a records file to begin.")

    # --------- loading pipeline (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose records file",
            filetypes=[("Records", "*.json *.jsonl *.csv *.txt"), ("All files", "*.*")],
        )
        if not path:
            return
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "Records are already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Loading…")
        self.progress.start()
        self._loaded = False
        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        try:
            asyncio.run(self._engine.load(load_records_async(path)))
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(self._engine.count()))

    def _on_load_ok(self, n_records: int) -> None:
        self.progress.stop()
        self._loaded = True
        self._set_status(f"Loaded {n_records:,} records.")
        self._log(f"Records ready ({n_records}).")
        self.entry_query.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading records.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load records.\nSee event log for details.")

    # --------- search ---------

    def _on_options_changed(self, _ev=None) -> None:
        keys = [k.strip() for k in self.entry_keys.get().split(",") if k.strip()]
        self._engine.config = dataclasses.replace(
            self._engine.config, key=keys or None, mode=self.opt_mode.get()
        )
        self._on_query_changed()

    def _on_query_changed(self, _ev=None) -> None:
        # debounce for smoother typing
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(160, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        if not self._loaded:
            self._set_results("error: please open a records file before searching.")
            return
        try:
            results = self._engine.complete(self.entry_query.get())
        except Exception as exc:
            self._set_results(f"error while searching: {exc}")
            self._log(f"ERROR in search: {exc!r}")
            return
        self._set_results("\n".join(self._fmt(r) for r in results) or "(no matches)")

    @staticmethod
    def _fmt(r: MatchEntry) -> str:
        return f"score: {r.match.score:<4} | #{r.index:<5} | {r.key or '-':<10} | {r.match.text}"

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")


if __name__ == "__main__":
    app = AutocompleteApp()
    app.mainloop()
