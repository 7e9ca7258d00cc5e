"""
Data + Donuts: working with color in data visualizations

Uses the Palmer penguins to show how to control colors of plots: built-in
palettes, hand-picked colors, highlighting a group, gradients for numeric
values, checking palettes for color vision deficiencies and making your own
reusable palettes.
"""
import matplotlib.pyplot as plt
import seaborn as sns

from datadonuts.colorpalettes import my_palettes, my_colors
from datadonuts.cvd import cvd_grid
from datadonuts.misc.datasets import load_penguins
from datadonuts.scales import scale_manual, scale_gradientn, \
    scale_gradient, scale_gradient2, diverging_norm
from datadonuts.util import desaturate, lighten

penguins = load_penguins()
species = penguins["species"].cat.categories


def bill_plot(palette=None, title=None):
    ax = sns.scatterplot(data=penguins, x="bill_length_mm", y="bill_depth_mm",
                         hue="species", style="species", palette=palette)
    ax.set(xlabel="Bill Length (mm)", ylabel="Bill Depth (mm)", title=title)
    plt.show()


# LET'S START WITH THE BASICS
ax = sns.scatterplot(data=penguins, x="bill_length_mm", y="bill_depth_mm",
                     color="hotpink")
ax.set(xlabel="Bill Length (mm)", ylabel="Bill Depth (mm)")
plt.show()

# the third dimension matters: Simpson's paradox
bill_plot(title="default colors")

# THERE ARE SO MANY WAYS TO CHOOSE COLOR PALETTES
bill_plot("Dark2", "ColorBrewer's Dark2")
bill_plot("viridis", "viridis")

# hand-selected, from https://github.com/JLSteenwyk/ggpubfigs
contrast_three = my_palettes("contrast_three", "discrete")
bill_plot(scale_manual(contrast_three, species), "contrast_three")

# how do the palettes look with color vision deficiency?
for panel, colors in cvd_grid(contrast_three).items():
    print("{:12} {}".format(panel, " ".join(colors)))

# CONNECTING GROUPS TO COLORS
# mapping levels to colors explicitly keeps colors fixed when the order of
# levels changes
reordered = dict(zip(["Adelie", "Gentoo", "Chinstrap"], contrast_three))
bill_plot(reordered, "reordered colors")

# HIGHLIGHTING ONE GROUP
blue, red, yellow = contrast_three
highlight = scale_manual(
    [blue,
     desaturate(lighten(yellow, 0.4), 0.5),
     desaturate(lighten(red), 0.4)],
    species)
bill_plot(highlight, "Adelie highlighted")
bill_plot(scale_manual(["#004488", "#babcbf", "#d7dade"], species),
          "grey with blue highlight")


# CONTINUOUS PALETTES
def mass_plot(cmap, norm=None, title=None):
    fig, ax = plt.subplots()
    points = ax.scatter(penguins["flipper_length_mm"],
                        penguins["bill_length_mm"],
                        c=penguins["body_mass_g"], cmap=cmap, norm=norm)
    fig.colorbar(points, ax=ax, label="Body Mass (g)")
    ax.set(xlabel="Flipper Length (mm)", ylabel="Bill Length (mm)",
           title=title)
    plt.show()


mass_plot("BuGn", title="ColorBrewer's BuGn")
mass_plot(scale_gradient("#5e1a99", "#de8423"), title="your own gradient")
mass_plot(scale_gradient2("#5e1a99", "white", "#de8423"),
          diverging_norm(penguins["body_mass_g"].mean()),
          title="diverging around the mean")

# MAKE YOUR OWN COLOR PALETTES FOR RE-USE
print("Available palettes:", ", ".join(my_colors))
bill_plot(scale_manual(my_palettes("ut_pop", "discrete", 3), species),
          "ut_pop")
mass_plot(scale_gradientn(my_palettes("veronese", "continuous")),
          title="veronese")
print(my_palettes("ut_pop", "continuous", 5))

# YOUR TURN: an overwhelming plot in MetBrewer's Egypt
egypt = ["#dd5129", "#0f7ba2", "#43b284", "#fab255"]
sns.set_theme(style="whitegrid", rc={"grid.color": egypt[3]})
ax = sns.scatterplot(data=penguins, x="flipper_length_mm", y="body_mass_g",
                     hue="island", palette=egypt[:3], alpha=0.7)
ax.tick_params(colors=egypt[1])
ax.set_xlabel("Flipper Length (mm)", color=egypt[0])
ax.set_ylabel("Body Mass (g)", color=egypt[0])
plt.show()
