"""Desktop window: enter an adjacency matrix, see path lengths and the graph."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Sequence

from matplotlib.figure import Figure

from fwgraph.calculator import MatrixError, calculate_floyd_warshall
from fwgraph.plotter import AXIS_LIMIT, PlotError, layout_graph, plot_graph

APP_VERSION = "1.0"

WINDOW_TITLE = "Кратчайшие пути между всеми парами вершин"
MATRIX_PROMPT = "Введите матрицу смежности для задания графа:"
MATRIX_HINT = "Например: \n0 1 0 0\n1 0 1 0\n0 1 0 1\n0 0 1 0"
COMPUTE_LABEL = "Применить алгоритм Флойда–Уоршелла"
RESULT_PROMPT = "Результат работы алгоритма:"
RESULT_HINT = "Здесь появится результат работы алгоритма"
RESET_LABEL = "Сбросить"
PLOT_PROMPT = "Визуализация графа:"
PLOT_ERROR_PREFIX = "Ошибка построения графика: "

_PLOT_BACKGROUND = (255 / 255, 249 / 255, 230 / 255)
_BUTTON_COLOR = "#216fff"
_BUTTON_ACTIVE = "#195ada"
_ERROR_COLOR = "red"
_TEXT_COLOR = "black"
_HINT_COLOR = "gray"


@dataclass(frozen=True)
class Outcome:
    """What a computation shows: the output text, and the matrix to draw if any."""

    text: str
    is_error: bool
    matrix: Optional[List[List[int]]] = None


def compute_outcome(text: str) -> Outcome:
    """Run the calculation on matrix text and report text and drawable matrix."""
    try:
        result = calculate_floyd_warshall(text)
    except MatrixError as err:
        return Outcome(text=str(err), is_error=True)
    try:
        layout_graph(result.matrix)
    except PlotError as err:
        return Outcome(text=PLOT_ERROR_PREFIX + str(err), is_error=True)
    return Outcome(text=result.output_text, is_error=False, matrix=result.matrix)


class _HintedText:
    """A Tk text box that shows a grey hint while it is empty."""

    def __init__(self, widget, hint: str, readonly: bool = False) -> None:
        self.widget = widget
        self.hint = hint
        self.readonly = readonly
        self._showing_hint = False
        self._color = _TEXT_COLOR
        widget.bind("<FocusIn>", self._on_focus_in)
        widget.bind("<FocusOut>", self._on_focus_out)
        self._show_hint()

    def get(self) -> str:
        if self._showing_hint:
            return ""
        return self.widget.get("1.0", "end-1c")

    def set(self, text: str, color: str = _TEXT_COLOR) -> None:
        self._color = color
        self._write(text, color)
        self._showing_hint = False
        if not text:
            self._show_hint()

    def _write(self, text: str, color: str) -> None:
        self.widget.configure(state="normal")
        self.widget.delete("1.0", "end")
        self.widget.insert("1.0", text)
        self.widget.configure(foreground=color)
        if self.readonly:
            self.widget.configure(state="disabled")

    def _show_hint(self) -> None:
        self._write(self.hint, _HINT_COLOR)
        self._showing_hint = True

    def _on_focus_in(self, _event) -> None:
        if self._showing_hint and not self.readonly:
            self._write("", self._color)
            self._showing_hint = False

    def _on_focus_out(self, _event) -> None:
        if not self.readonly and not self.get():
            self._show_hint()


class MainWindow:
    """Matrix input, result text and graph drawing; run() opens it on screen."""

    def __init__(self) -> None:
        self.matrix_text = ""
        self.output_text = ""
        self.output_is_error = False
        self.figure = Figure(figsize=(5.5, 5.5), facecolor="white")
        self.axes = self.figure.add_subplot()
        self._root = None
        self._canvas = None
        self._matrix_input: Optional[_HintedText] = None
        self._output: Optional[_HintedText] = None
        self._clear_plot()

    def _style_axes(self) -> None:
        ax = self.axes
        ax.set_xlim(-AXIS_LIMIT, AXIS_LIMIT)
        ax.set_ylim(-AXIS_LIMIT, AXIS_LIMIT)
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_facecolor(_PLOT_BACKGROUND)
        for spine in ax.spines.values():
            spine.set_edgecolor("black")
            spine.set_linewidth(0.7)

    def _clear_plot(self) -> None:
        self.axes.clear()
        self._style_axes()

    def _refresh(self) -> None:
        if self._output is not None:
            color = _ERROR_COLOR if self.output_is_error else _TEXT_COLOR
            self._output.set(self.output_text, color)
        if self._canvas is not None:
            self._canvas.draw_idle()

    def compute(self) -> Outcome:
        """Compute shortest path lengths for the current matrix and redraw."""
        if self._matrix_input is not None:
            self.matrix_text = self._matrix_input.get()
        outcome = compute_outcome(self.matrix_text)
        self.output_text = outcome.text
        self.output_is_error = outcome.is_error
        if outcome.is_error or outcome.matrix is None:
            self._clear_plot()
        else:
            plot_graph(self.axes, outcome.matrix)
            self._style_axes()
        self._refresh()
        return outcome

    def reset(self) -> None:
        """Clear the input, the result and the drawing."""
        self.matrix_text = ""
        self.output_text = ""
        self.output_is_error = False
        if self._matrix_input is not None:
            self._matrix_input.set("")
        self._clear_plot()
        self._refresh()

    def _button(self, tk, parent, text: str, command, font):
        return tk.Button(
            parent,
            text=text,
            command=command,
            font=font,
            bg=_BUTTON_COLOR,
            fg="white",
            activebackground=_BUTTON_ACTIVE,
            activeforeground="white",
            relief="flat",
            padx=18,
            pady=8,
        )

    def run(self) -> None:
        """Open the window and block until it is closed."""
        import tkinter as tk

        from matplotlib.backends.backend_tkagg import (
            FigureCanvasTkAgg,
            NavigationToolbar2Tk,
        )

        root = tk.Tk()
        root.title(WINDOW_TITLE)
        root.geometry("1000x650")
        root.configure(bg="white")
        font = ("Courier New", 11, "bold")
        self._root = root

        main = tk.Frame(root, bg="white", padx=15, pady=15)
        main.pack(fill="both", expand=True)

        controls = tk.Frame(main, bg="white")
        controls.pack(side="left", fill="both", expand=True, padx=(0, 10))

        tk.Label(controls, text=MATRIX_PROMPT, font=font, bg="white", anchor="w").pack(
            fill="x", pady=(0, 10)
        )
        text_options = dict(
            font=font,
            height=8,
            width=40,
            bg="white",
            relief="solid",
            borderwidth=1,
            padx=8,
            pady=8,
        )
        matrix_widget = tk.Text(controls, **text_options)
        matrix_widget.pack(fill="both", expand=True)
        self._matrix_input = _HintedText(matrix_widget, MATRIX_HINT)
        if self.matrix_text:
            self._matrix_input.set(self.matrix_text)

        self._button(tk, controls, COMPUTE_LABEL, self.compute, font).pack(
            fill="x", pady=10
        )
        tk.Label(controls, text=RESULT_PROMPT, font=font, bg="white", anchor="w").pack(
            fill="x"
        )
        output_widget = tk.Text(controls, **text_options)
        output_widget.pack(fill="both", expand=True, pady=(10, 0))
        self._output = _HintedText(output_widget, RESULT_HINT, readonly=True)

        reset_button = self._button(tk, controls, RESET_LABEL, self.reset, font)
        reset_button.pack(fill="x", pady=10)

        plot_area = tk.Frame(main, bg="white")
        plot_area.pack(side="right", fill="both", expand=True)
        tk.Label(plot_area, text=PLOT_PROMPT, font=font, bg="white").pack()
        canvas = FigureCanvasTkAgg(self.figure, master=plot_area)
        toolbar = NavigationToolbar2Tk(canvas, plot_area, pack_toolbar=False)
        toolbar.update()
        toolbar.pack(side="bottom", fill="x")
        canvas.get_tk_widget().pack(fill="both", expand=True)
        self._canvas = canvas

        status = tk.Frame(root, bg="white")
        status.pack(side="bottom", fill="x")
        tk.Label(status, text=f"v{APP_VERSION}", font=font, bg="white").pack(
            side="right", padx=10
        )

        self._refresh()
        try:
            root.mainloop()
        finally:
            self._root = None
            self._canvas = None
            self._matrix_input = None
            self._output = None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the window."""
    parser = argparse.ArgumentParser(
        prog="fwgraph",
        description="Shortest path lengths between all pairs of graph vertices.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s v{APP_VERSION}"
    )
    parser.parse_args(argv)
    MainWindow().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())