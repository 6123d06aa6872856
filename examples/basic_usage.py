"""Basic hivecolors usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from hivecolors import (
    color_scale,
    fill_scale,
    generate_palette,
    make_palette_factory,
    register_colormaps,
    save_swatch,
)


def demonstrate_palettes() -> None:
    print("5 colors:", generate_palette(5))
    print("Reversed, half transparent:", generate_palette(3, alpha=0.5, direction=-1))
    print("Middle of the map only:", generate_palette(4, begin=0.3, end=0.7))

    palette = make_palette_factory(begin=0.1, end=0.9)
    print("Factory, 6 colors:", palette(6))


def demonstrate_scales() -> None:
    register_colormaps()
    data = np.random.default_rng(0).normal(size=(20, 20))

    fig, (left, right) = plt.subplots(1, 2, figsize=(8, 4))
    left.imshow(data, cmap="hive")
    left.set_title("continuous fill")

    categories = np.arange(6)
    right.bar(categories, categories + 1, color=color_scale(discrete=True).colors_for(len(categories)))
    right.set_title("discrete colour")

    fig.savefig("hive_scales.png", dpi=100)
    print("Saved hive_scales.png")

    cmap = fill_scale(begin=0.2, end=0.8).to_colormap()
    print("Sub-range colormap:", cmap.name, cmap.N)


if __name__ == "__main__":
    demonstrate_palettes()
    demonstrate_scales()
    print("Saved", save_swatch("hive_swatch.png", 16))
