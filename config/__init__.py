from .settings import *  # noqa: F401,F403
from .run_config import Config, DelayRange  # noqa: F401
