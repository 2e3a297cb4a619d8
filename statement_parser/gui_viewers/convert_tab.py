# statement_parser/gui_viewers/convert_tab.py
from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, ttk

from statement_parser.controllers.batch import (
    BatchAborted,
    collect_input_files,
    parse_many,
)
from statement_parser.errors import UnrecognizedStatementError
from statement_parser.writers import write_transactions

log = logging.getLogger(__name__)

UNRECOGNIZED_TITLE = "Unable to Parse Statement"


class ConvertTab(ttk.Frame):
    """Primary function: parse one or more statement PDFs into a CSV/Excel file."""
    def __init__(self, master, mb):
        super().__init__(master)
        self.mb = mb
        self._build()

    # ---------- UI ----------
    def _build(self):
        pad = {'padx': 8, 'pady': 6}

        self.in_path = tk.StringVar()
        self.out_path = tk.StringVar()
        self.folder_mode = tk.BooleanVar(value=False)
        self.include_subfolders = tk.BooleanVar(value=True)

        io_frame = ttk.LabelFrame(self, text="Files")
        io_frame.pack(fill="x", **pad)

        ttk.Label(io_frame, text="Input PDF(s) or folder:").grid(row=0, column=0, sticky="w")
        ttk.Entry(io_frame, textvariable=self.in_path, width=90).grid(row=0, column=1, sticky="we", padx=5)
        ttk.Button(io_frame, text="Browse…", command=self._browse_in).grid(row=0, column=2)

        ttk.Label(io_frame, text="Output File:").grid(row=1, column=0, sticky="w")
        ttk.Entry(io_frame, textvariable=self.out_path, width=90).grid(row=1, column=1, sticky="we", padx=5)
        ttk.Button(io_frame, text="Browse…", command=self._browse_out).grid(row=1, column=2)
        io_frame.columnconfigure(1, weight=1)

        opt = ttk.LabelFrame(self, text="Options")
        opt.pack(fill="x", **pad)
        ttk.Checkbutton(opt, text="Folder mode", variable=self.folder_mode).grid(row=0, column=0, sticky="w")
        ttk.Checkbutton(opt, text="Include subfolders", variable=self.include_subfolders).grid(row=0, column=1, sticky="w")

        runf = ttk.Frame(self)
        runf.pack(fill="x", **pad)
        ttk.Button(runf, text="Start", command=self.run_conversion).pack(side="left")
        ttk.Button(runf, text="Quit", command=self.master.destroy).pack(side="right")

        logf = ttk.LabelFrame(self, text="Log")
        logf.pack(fill="both", expand=True, **pad)
        self.log = tk.Text(logf, height=12)
        self.log.pack(fill="both", expand=True, padx=5, pady=5)

    # ---------- actions ----------
    def _browse_in(self):
        if self.folder_mode.get():
            path = filedialog.askdirectory(title="Select a folder containing PDF files")
            if path:
                self.in_path.set(path)
            return
        paths = filedialog.askopenfilenames(
            title="Select one or more PDF files",
            filetypes=[("PDF files", "*.pdf"), ("All files", "*.*")],
        )
        if not paths:
            return
        if len(paths) == 1:
            self.in_path.set(paths[0])
        else:
            self.in_path.set(" ".join(f'"{p}"' for p in paths))

    def _browse_out(self):
        path = filedialog.asksaveasfilename(
            title="Where do you want to save the output file",
            defaultextension=".csv",
            filetypes=[("Comma separated text file", "*.csv"), ("Excel workbook", "*.xlsx")],
        )
        if path:
            self.out_path.set(path)

    def logln(self, msg: str):
        self.log.insert("end", msg + "\n")
        self.log.see("end")
        self.update_idletasks()

    def _ask_skip(self, path: Path) -> bool:
        return self.mb.askyesno(
            UNRECOGNIZED_TITLE,
            f'The file "{path}" could not be parsed. It was not recognized as a '
            "supported statement type. Do you want to skip this statement and continue?",
        )

    def run_conversion(self):
        try:
            out_text = self.out_path.get().strip()
            if not out_text:
                self.mb.showerror("Error", "Please choose an output file.")
                return
            out_path = Path(out_text)

            try:
                files = collect_input_files(
                    self.in_path.get(),
                    folder_mode=self.folder_mode.get(),
                    include_subfolders=self.include_subfolders.get(),
                )
            except ValueError as e:
                self.mb.showerror("Error", str(e))
                return
            if not files:
                self.mb.showerror("Error", "No PDF files were found.")
                return

            if out_path.exists():
                if not self.mb.askyesno("Confirm Overwrite",
                                        f"The file already exists:\n\n{out_path}\n\nDo you want to overwrite it?"):
                    return

            self.log.delete("1.0", "end")
            self.logln(f"Parsing {len(files)} statement(s)…")
            try:
                result = parse_many(files, on_unrecognized=self._ask_skip)
            except UnrecognizedStatementError as e:
                self.mb.showerror(UNRECOGNIZED_TITLE, str(e))
                self.logln(f"ERROR: {e}")
                return
            except BatchAborted as e:
                self.logln(str(e))
                return

            for p in result.skipped_files:
                self.logln(f"Skipped (unrecognized): {p}")
            for p, err in result.failed:
                self.logln(f"FAILED: {p}: {err}")

            self.logln(f"Writing {len(result.transactions)} transaction(s) → {out_path}")
            write_transactions(result.transactions, out_path)

            if result.failed:
                failed = "\n".join(f"{p}: {err}" for p, err in result.failed)
                self.mb.showerror(
                    "Parsing completed with errors",
                    f"These statements could not be parsed:\n\n{failed}",
                )
            else:
                self.mb.showinfo("Done", "Parsing completed successfully")
        except Exception as e:
            log.exception("Conversion failed")
            self.mb.showerror("Error", str(e))
            self.logln(f"ERROR: {e}")
