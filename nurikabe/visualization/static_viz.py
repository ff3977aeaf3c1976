"""
Static visualization for Nurikabe puzzles.
"""

import matplotlib.pyplot as plt
import matplotlib.patches as patches
from typing import Optional, Tuple, List
from pathlib import Path

from .. import config
from ..core.puzzle import CellState


class PuzzleVisualizer:
    """Visualize Nurikabe grids (puzzles or configurations)"""

    def __init__(self, figsize: Tuple[int, int] = config.VIZ_FIGSIZE, dpi: int = config.VIZ_DPI):
        """
        Initialize visualizer.

        Args:
            figsize: Figure size in inches
            dpi: Dots per inch for saved images
        """
        self.figsize = figsize
        self.dpi = dpi

        # Visual parameters
        self.grid_color = '#9E9E9E'
        self.sea_color = '#263859'
        self.island_color = '#F5F1E3'
        self.seed_color = '#F5F1E3'
        self.empty_color = '#FFFFFF'
        self.number_color = '#1B1B1B'
        self.background_color = '#F7F7F7'

    def _cell_color(self, state: CellState) -> str:
        if state is CellState.SEA:
            return self.sea_color
        if state is CellState.ISLAND:
            return self.island_color
        if state is CellState.NUMBERED:
            return self.seed_color
        return self.empty_color

    def visualize(self, source,
                  show_grid: bool = True,
                  title: Optional[str] = None,
                  save_path: Optional[Path] = None,
                  show_plot: bool = True) -> plt.Figure:
        """
        Create visualization of a grid.

        Args:
            source: Puzzle or configuration to draw
            show_grid: Whether to show grid lines
            title: Optional title for the plot
            save_path: Optional path to save the image
            show_plot: Whether to display the plot

        Returns:
            The matplotlib figure
        """
        fig, ax = plt.subplots(figsize=self.figsize)
        fig.patch.set_facecolor(self.background_color)

        self._draw(ax, source, show_grid)

        if title:
            ax.set_title(title, fontsize=16, pad=20)

        # Save if requested
        if save_path:
            save_path = Path(save_path)
            save_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path, dpi=self.dpi, bbox_inches='tight',
                        facecolor=self.background_color)

        # Show plot if requested
        if show_plot:
            plt.show()
        else:
            plt.close(fig)

        return fig

    def _draw(self, ax, source, show_grid: bool = True):
        """Draw cells, numbers and grid lines on an axis"""
        ax.set_xlim(-0.5, source.cols - 0.5)
        ax.set_ylim(-0.5, source.rows - 0.5)
        ax.set_aspect('equal')

        # Invert y-axis so row 0 is at the top
        ax.invert_yaxis()

        for row_idx, row in enumerate(source.grid):
            for col_idx, cell in enumerate(row):
                rect = patches.Rectangle(
                    (col_idx - 0.5, row_idx - 0.5), 1, 1,
                    facecolor=self._cell_color(cell.state),
                    edgecolor=self.grid_color if show_grid else 'none',
                    linewidth=1.0
                )
                ax.add_patch(rect)

                if cell.is_seed:
                    ax.text(col_idx, row_idx, str(cell.number),
                            ha='center', va='center', fontsize=14, fontweight='bold',
                            color=self.number_color)
                elif cell.state is CellState.ISLAND:
                    # Small dot marks decided island cells apart from empty ones
                    ax.add_patch(plt.Circle((col_idx, row_idx), 0.08,
                                            color=self.number_color, alpha=0.4))

        # Remove axes
        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)

    def create_comparison_plot(self, sources: List,
                               titles: List[str],
                               save_path: Optional[Path] = None) -> plt.Figure:
        """Create side-by-side comparison of multiple grids"""
        n_sources = len(sources)
        fig, axes = plt.subplots(1, n_sources, figsize=(5 * n_sources, 5))

        if n_sources == 1:
            axes = [axes]

        for ax, source, title in zip(axes, sources, titles):
            self._draw(ax, source)
            ax.set_title(title, fontsize=12)

        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=self.dpi, bbox_inches='tight')

        return fig
