import matplotlib.pyplot as plt
import matplotlib.patches as patches

from conftest import SCENARIO_SOLUTION
from nurikabe.core.configuration import NurikabeConfig
from nurikabe.core.utils import PuzzleConverter
from nurikabe.visualization import PuzzleVisualizer


def test_visualize_saves_image(scenario_puzzle, tmp_path):
    viz = PuzzleVisualizer()
    save_path = tmp_path / "nested" / "puzzle.png"
    fig = viz.visualize(scenario_puzzle, title="Scenario", save_path=save_path, show_plot=False)

    assert save_path.exists()
    ax = fig.axes[0]
    cells = [p for p in ax.patches if isinstance(p, patches.Rectangle)]
    assert len(cells) == 9
    assert sorted(t.get_text() for t in ax.texts) == ["1", "1", "3"]


def test_visualize_configuration():
    config = NurikabeConfig.from_text("1 2\n1 .").get_successors()[0].get_successors()[1]
    fig = PuzzleVisualizer().visualize(config, show_grid=False, show_plot=False)
    assert fig.axes[0].get_title() == ""


def test_sea_and_island_colors():
    viz = PuzzleVisualizer()
    solution = PuzzleConverter.from_string(SCENARIO_SOLUTION)
    fig = viz.visualize(solution, show_plot=False)
    rectangles = [p for p in fig.axes[0].patches if isinstance(p, patches.Rectangle)]
    sea = [r for r in rectangles if r.get_facecolor() == patches.Rectangle((0, 0), 1, 1, facecolor=viz.sea_color).get_facecolor()]
    assert len(sea) == 4


def test_comparison_plot(scenario_puzzle, tmp_path):
    viz = PuzzleVisualizer()
    save_path = tmp_path / "comparison.png"
    solution = PuzzleConverter.from_string(SCENARIO_SOLUTION)
    fig = viz.create_comparison_plot([scenario_puzzle, solution], ["Puzzle", "Solution"], save_path=save_path)

    assert save_path.exists()
    assert [ax.get_title() for ax in fig.axes] == ["Puzzle", "Solution"]
    plt.close(fig)
