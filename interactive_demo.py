"""
Interactive viewer for boardgrid boards.
Display a board and rotate, trim or search it with keyboard commands.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from array2d import Array2D
from ascii_render import render_grid
from grid_parser import parse_grid
from grid_types import Coord


def _copy(grid: Array2D[str]) -> Array2D[str]:
    """Independent copy keeping rotation and the outside value."""
    copy = Array2D(grid.origin_height, grid.origin_width, grid.elements, outside=grid.outside)
    copy.reset_and_rotate(grid.rotation)
    return copy


def _view_copy(grid: Array2D[str]) -> Array2D[str]:
    """Unrotated snapshot of the current view, so its coordinates are view coordinates."""
    cells = [grid[r, c] for r in range(grid.height) for c in range(grid.width)]
    return Array2D(grid.height, grid.width, cells, outside=grid.outside)


class InteractiveDemo:
    """Interactive demo for rotation, trimming and word search."""

    def __init__(self, grid: Array2D[str], words: list[str], fill: str = ".") -> None:
        self.grid = grid
        self.original_grid = _copy(grid)
        self.words = words
        self.fill = fill
        self.word_idx = 0
        self.highlight: list[Coord] = []
        self.console = Console()
        self.status_message = "Ready"

    def generate_display(self) -> Panel:
        """Generate the current display with board and status."""
        status = Text()
        status.append("Shape: ", style="bold")
        status.append(
            f"{self.grid.height}x{self.grid.width} "
            f"(origin {self.grid.origin_height}x{self.grid.origin_width}, "
            f"rotation {self.grid.rotation * 90}°)\n\n"
        )

        grid_text = "\n".join(render_grid(self.grid, highlight=self.highlight))
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  R - Rotate clockwise\n")
        status.append("  L - Rotate counter-clockwise\n")
        status.append("  0 - Reset rotation\n")
        status.append(f"  T - Trim '{self.fill}' border\n")
        status.append("  S - Seek next word\n")
        status.append("  U - Undo all changes\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Boardgrid Interactive Demo", border_style="green", width=80)

    def rotate(self, count: int) -> None:
        self.grid.rotate(count)
        self.highlight = []
        self.status_message = f"Rotated to {self.grid.rotation * 90}°"

    def trim(self) -> None:
        try:
            self.grid.trim(self.fill)
        except ValueError as e:
            self.status_message = f"✗ {e}"
            return
        self.highlight = []
        self.status_message = f"✓ Trimmed to {self.grid.height}x{self.grid.width}"

    def seek_next(self) -> None:
        """Search for the next preset word and highlight it."""
        if not self.words:
            self.status_message = "No words to seek"
            return
        word = self.words[self.word_idx % len(self.words)]
        self.word_idx += 1

        found = _view_copy(self.grid).seek(word)
        if found is None:
            self.highlight = []
            self.status_message = f"✗ '{word}' not found"
        else:
            self.highlight = found
            self.status_message = f"✓ '{word}' found from {tuple(found[0])} to {tuple(found[-1])}"

    def reset_grid(self) -> None:
        """Reset the board to its original state."""
        self.grid = _copy(self.original_grid)
        self.highlight = []
        self.status_message = "Board reset to original state"

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'r':
                        self.rotate(1)
                    elif key.lower() == 'l':
                        self.rotate(-1)
                    elif key == '0':
                        self.grid.reset_and_rotate(0)
                        self.highlight = []
                        self.status_message = "Rotation reset"
                    elif key.lower() == 't':
                        self.trim()
                    elif key.lower() == 's':
                        self.seek_next()
                    elif key.lower() == 'u':
                        self.reset_grid()
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    words=dict(
        grid='.......|.CAT...|.DOG.X.|.FOX...|.......',
        words=["TAC", "CDF", "TOF", "GOD", "ZZZ"],
        fill=".",
    ),
    frame=dict(
        grid='XXXX|XABX|XXXX',
        words=["AB", "BA"],
        fill="X",
    ),
)


def main(layout: dict) -> None:
    """Run interactive demo with a sample board."""
    grid = parse_grid(layout['grid'])
    demo = InteractiveDemo(grid, layout["words"], fill=layout["fill"])
    demo.run()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'print':
        # No TTY - render every layout once
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')

        for name, layout in LAYOUTS.items():
            grid = parse_grid(layout['grid'])
            print(f"{name}:")
            print(grid)
            for word in layout['words']:
                print(f"  seek {word!r}: {grid.seek(word)}")
            print()
    else:
        main(LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else 'words'])
