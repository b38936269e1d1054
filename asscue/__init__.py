# flake8: noqa
from ._logging import LogLevel, logger
from ._metadata import version
from .colourspace import *
from .convert import *
from .core import *
from .exception import *
from .parser import *
from .query import *
from .resolver import *
from .tags import *
