from . import functional
from . import predicates
from .predicates import *
from .strings import *
