"""
Data + Donuts: making plots with seaborn and matplotlib

Uses the 'iris' and 'mtcars' datasets to introduce scatter plots with
regression lines, facets, text labels and saving figures.
"""
import datetime
import os

import matplotlib.pyplot as plt
import seaborn as sns

from datadonuts.misc.datasets import load_iris, load_mtcars
from datadonuts.statistics import cor_test, correlation_label

# where plots should go; relative paths are relative to where the script runs
outpath = os.getenv("DATADONUTS_PLOTS", ".")

# the date makes a handy suffix for any outputs
today = datetime.date.today().strftime("%Y%m%d")


# EXAMPLE PLOT: IRIS DATASET
# measurements of 150 iris flowers: four lengths in centimeters and a species
iris = load_iris()
print(iris.head())

# correlation of petal and sepal length within each species
labels = {}
for species, group in iris.groupby("Species", observed=True):
    result = cor_test(group["Petal.Length"], group["Sepal.Length"])
    labels[species] = correlation_label(result)
    print(species, result)

grid = sns.lmplot(data=iris, x="Petal.Length", y="Sepal.Length",
                  col="Species", ci=None, height=4, aspect=0.5,
                  line_kws={"color": "darkgrey"},
                  scatter_kws={"alpha": 0.5, "color": "black"})
for species, ax in grid.axes_dict.items():
    ax.set_title(species.title())
    ax.text(5.5, 4.5, labels[species], size=8, ha="center",
            bbox={"boxstyle": "round", "facecolor": "white"})
grid.set_axis_labels("Petal Length (cm)", "Sepal Length (cm)")
grid.figure.suptitle("Correlation of Petal and Sepal Length\n"
                     "in the 'iris' dataset", y=1.05)

fileout = os.path.join(outpath, "irisplot_{}.png".format(today))
grid.savefig(fileout, dpi=150)
print("Saved", fileout)


# YOUR TURN: MTCARS DATASET
# design details of 32 cars from Motor Trend (1974); we focus on
# disp (displacement), wt (weight in 1000 lbs) and am (0=automatic, 1=manual)
mtcars = load_mtcars()
mtcars["transmission"] = mtcars["am"].map({0: "automatic", 1: "manual"})

# try a different style, point color or opacity
sns.set_theme(style="whitegrid")
ax = sns.scatterplot(data=mtcars, x="wt", y="disp", hue="transmission",
                     alpha=0.8)
ax.set(xlabel="Weight (1000 lbs)", ylabel="Displacement (cu. in.)")
plt.show()
