from .misc.datasets import _DatasetInfo
from .version import \
    short_version as __version__, git_revision as __git_version__

datasets = _DatasetInfo()
