# Config Constants Package
# Import everything from sub-modules for easy access:
#   from config.constants import SITE_NAME, COUNSELOR_NAMES, MSG_GENERIC_ERROR, etc.

from .branding import *
from .limits import *
from .messages import *
from .choices import *
