from .module import Modules
from .string import String
from .iters import Iters

module = Modules()
string = String()
iters  = Iters()
