"""Information gain visualization functions."""

import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from id3_tlbx.analysis.information_gain import InformationGainResult
from id3_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


def plot_information_gains(
    result: InformationGainResult,
    figsize: tuple[int, int] = (8, 5),
    ax: Axes | None = None,
    config: PlottingConfig = DEFAULT_PLOT_CFG,
) -> Figure:
    """Plot the information gain of every attribute as a bar chart.

    The attribute ID3 selects is highlighted and the dataset entropy E(S), the upper bound of any gain,
    is drawn as a dashed reference line.

    Args:
        result: Analysis results from InformationGainAnalyzer.fit().result()
        figsize: Figure size (width, height), ignored when ``ax`` is given
        ax: Optional axes to draw into
        config: Plotting style

    Returns:
        matplotlib Figure object
    """
    with config.apply():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()

        data = result.gains.assign(
            label=lambda d: d.attribute.map(lambda name: result.pretty_by_col.get(name, name)),
        )
        base_color = sns.color_palette(config.palette)[0]
        colors = [
            config.highlight_color if attribute_id == result.best_attribute_id else base_color
            for attribute_id in data.attribute_id
        ]

        sns.barplot(data=data, x="label", y="information_gain", hue="label", palette=colors, legend=False, ax=ax)
        ax.axhline(result.dataset_entropy, color="grey", linestyle="--", linewidth=1, label="E(S)")
        for patch, gain in zip(ax.patches, data.information_gain, strict=False):
            ax.annotate(
                f"{gain:.3f}",
                (patch.get_x() + patch.get_width() / 2, patch.get_height()),
                ha="center",
                va="bottom",
                fontsize=config.tick_size,
            )

        ax.set_xlabel("Attribute")
        ax.set_ylabel("Information gain [bits]")
        ax.set_title("Information Gain per Attribute")
        ax.legend(loc="upper right")
        fig.tight_layout()

    return fig
