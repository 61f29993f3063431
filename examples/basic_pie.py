"""Example rendering a dataset with each legend layout."""

from pie_chart_svg import (
    ChartDataset,
    ColorSequencer,
    ItemDatum,
    LegendMode,
    PieChartSVG,
    layout_chart,
)


def main():
    data = ChartDataset(
        "Languages",
        (
            ItemDatum("Python", 48),
            ItemDatum("Rust", 21),
            ItemDatum("Go", 17),
            ItemDatum("C", 9),
            ItemDatum("Other", 5),
        ),
        units="repos",
    )

    for mode in LegendMode:
        # same seed so the three files share colors
        model = layout_chart(data, mode=mode, sequencer=ColorSequencer(seed=2024))
        chart = PieChartSVG(model)
        chart.wedges.attr("opacity", 0.9)
        chart.save(f"languages_{mode.value}.svg")


if __name__ == "__main__":
    main()
