from __future__ import annotations

from .common import *
from .access import *
from .spectrum import *
