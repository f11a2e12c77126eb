__title__ = 'argbind'
__author__ = 'argbind contributors'
__license__ = 'MIT'
__version__ = "0.0.0"

from .arguments import *
from .conversions import *
from .faults import *
from .helpers import *
from .options import *
from .variables import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the descriptors
__all__ += arguments.__all__  # type: ignore[attr-defined]
# Load the exposed API of the conversions
__all__ += conversions.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the front-end helpers
__all__ += helpers.__all__  # type: ignore[attr-defined]
# Load the exposed API of the registry
__all__ += options.__all__  # type: ignore[attr-defined]
# Load the exposed API of the bound variables
__all__ += variables.__all__  # type: ignore[attr-defined]
