"""Comment form and list for the anonymous comment store.

Validation failures are the one place the UI raises an error dialog.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox
from typing import TYPE_CHECKING, Sequence

from ...errors import CommentValidationError
from ...models import Comment

if TYPE_CHECKING:
    from ...application import AsteroidMonitorApp

logger = logging.getLogger(__name__)


def build_comments_panel(app: "AsteroidMonitorApp") -> tk.Frame:
    panel = tk.Frame(app, bg="black")
    panel.pack(fill="x", padx=10, pady=(0, 10))

    form = tk.Frame(panel, bg="black")
    form.pack(fill="x")
    tk.Label(form, text="Name", bg="black", fg="#B0B0B0").pack(side="left")
    name_var = tk.StringVar()
    tk.Entry(form, textvariable=name_var, width=18).pack(side="left", padx=(4, 10))
    tk.Label(form, text="Comment", bg="black", fg="#B0B0B0").pack(side="left")
    text_var = tk.StringVar()
    tk.Entry(form, textvariable=text_var, width=50).pack(
        side="left", padx=(4, 10), fill="x", expand=True
    )
    tk.Label(form, text="Rating", bg="black", fg="#B0B0B0").pack(side="left")
    rating_var = tk.IntVar(value=5)
    tk.Spinbox(form, from_=1, to=5, textvariable=rating_var, width=3).pack(
        side="left", padx=(4, 10)
    )

    comments_text = tk.Text(
        panel, height=5, bg="#101010", fg="lightgray", state="disabled", wrap="word"
    )

    def _submit() -> None:
        try:
            rating = rating_var.get()
        except tk.TclError:
            rating = 0
        try:
            app.comment_store.add(name_var.get(), text_var.get(), rating)
        except CommentValidationError as exc:
            messagebox.showerror("Comment not posted", str(exc), parent=app)
            return
        name_var.set("")
        text_var.set("")
        rating_var.set(5)
        refresh_comments(comments_text, app.comment_store.load())

    tk.Button(form, text="Post", command=_submit).pack(side="left")
    comments_text.pack(fill="x", pady=(6, 0))
    refresh_comments(comments_text, app.comment_store.load())
    app.comments_text = comments_text
    return panel


def refresh_comments(widget: tk.Text, comments: Sequence[Comment]) -> None:
    widget.configure(state="normal")
    try:
        widget.delete("1.0", "end")
        if not comments:
            widget.insert("end", "No comments yet. Be the first!\n")
        for comment in comments:
            stars = "★" * comment.rating + "☆" * (5 - comment.rating)
            widget.insert("end", f"{comment.name} {stars} ({comment.date})\n  {comment.text}\n")
    finally:
        widget.configure(state="disabled")
