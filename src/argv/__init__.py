"""Simple GNU-style command-line argument classifier.

Goes through a list of arguments and sorts them into positional arguments
and option/value pairs, without a predeclared set of expected flags::

    from argv import Argv

    parsed = Argv(sys.argv[1:]).parse()
"""

from .args import Argv
from .classifier import classify
from .errors import ArgvError, InvalidArgumentsError
from .models import ClassifiedArgs, OptionPair

__all__ = [
    "Argv",
    "ArgvError",
    "ClassifiedArgs",
    "InvalidArgumentsError",
    "OptionPair",
    "classify",
]
