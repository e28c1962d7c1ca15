"""
signai

Sign analysis of a small imperative language by abstract interpretation.

"""

from signai.abstractions.sign_abstraction import BOTTOM, NEGATIVE, POSITIVE, TOP, ZERO, Sign
from signai.memory import Memory
from signai.abstract_interpreter import AbstractInterpreter, FixpointDivergence, analyze

from loguru import logger

# silent as a library until a front end calls signai.logger.initialize
logger.disable("signai")

__version__ = "0.1.0"
