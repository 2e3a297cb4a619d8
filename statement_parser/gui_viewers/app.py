# statement_parser/gui_viewers/app.py
from __future__ import annotations

import tkinter as tk
from tkinter import messagebox, ttk
from types import SimpleNamespace

from statement_parser.gui_viewers.convert_tab import ConvertTab


class App(tk.Tk):
    """
    Top-level window hosting the convert tab.
    The convert tab's variables are mirrored on the App for convenience.
    """
    def __init__(self, messagebox_api=None):
        super().__init__()
        self.style = ttk.Style(self)
        try:
            self.style.theme_use("clam")
        except tk.TclError:
            pass

        # Dependency-injected messagebox wrapper; calls module functions at call time
        self.mb = messagebox_api or SimpleNamespace(
            showinfo=lambda *a, **k: messagebox.showinfo(*a, **k),
            showerror=lambda *a, **k: messagebox.showerror(*a, **k),
            askyesno=lambda *a, **k: messagebox.askyesno(*a, **k),
        )
        self.title("Statement Parser")
        self.geometry("860x560")
        self.minsize(720, 480)

        self.nb = ttk.Notebook(self)
        self.nb.pack(fill="both", expand=True)

        self.convert_tab = ConvertTab(self, self.mb)
        self.nb.add(self.convert_tab, text="Parse Statements")

        self.in_path = self.convert_tab.in_path
        self.out_path = self.convert_tab.out_path
        self.folder_mode = self.convert_tab.folder_mode
        self.include_subfolders = self.convert_tab.include_subfolders
        self.log = self.convert_tab.log


def main() -> None:
    from statement_parser.utilities import configure_logging

    configure_logging()
    App().mainloop()


if __name__ == "__main__":
    main()
