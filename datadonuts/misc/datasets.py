"""
Reference datasets used in the workshops.

All loaders return pandas data frames with the column names used in R, so
that the workshop scripts read the same in both languages.
"""
import json
import logging
import os

import pandas as pd

from datadonuts.misc import environ

log = logging.getLogger(__name__)

DATASETS_DIR = os.path.join(os.path.dirname(__file__), "..", "datasets")

IRIS_COLUMNS = ["Sepal.Length", "Sepal.Width", "Petal.Length", "Petal.Width"]
PENGUIN_CATEGORIES = ["species", "island", "sex"]


class _DatasetInfo(dict):
    def __init__(self):
        super().__init__()
        with open(os.path.join(DATASETS_DIR, 'datasets.info'), 'r') as f:
            info = json.load(f)
        self.update(info)
        self.__dict__.update(info)


def load_iris():
    """Fisher's iris data, from the copy bundled with scikit-learn."""
    # pylint: disable=import-outside-toplevel
    from sklearn.datasets import load_iris as sklearn_iris

    log.info("Loading iris")
    bunch = sklearn_iris(as_frame=True)
    data = bunch.data.copy()
    data.columns = IRIS_COLUMNS
    data["Species"] = pd.Categorical.from_codes(
        bunch.target, categories=list(bunch.target_names))
    return data


def load_mtcars():
    """Motor Trend car road tests, indexed by the car model."""
    log.info("Loading mtcars")
    return pd.read_csv(os.path.join(DATASETS_DIR, "mtcars.csv"),
                       index_col="model")


def load_penguins():
    """
    Palmer penguins; the data is downloaded on first use and kept in
    `environ.cache_dir()`.
    """
    # pylint: disable=import-outside-toplevel
    import seaborn

    data_home = os.path.join(environ.cache_dir(), "seaborn-data")
    log.info("Loading penguins (cache: %s)", data_home)
    data = seaborn.load_dataset("penguins", data_home=data_home)
    for column in PENGUIN_CATEGORIES:
        data[column] = data[column].astype("category")
    return data


LOADERS = {
    "iris": load_iris,
    "mtcars": load_mtcars,
    "penguins": load_penguins,
}


def dataset_names():
    return sorted(LOADERS)


def load(name):
    """Load a dataset by name; raises `KeyError` for unknown datasets."""
    try:
        loader = LOADERS[name]
    except KeyError:
        raise KeyError(
            f"unknown dataset {name!r}; available: "
            + ", ".join(dataset_names())) from None
    return loader()
