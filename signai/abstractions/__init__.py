from signai.abstractions.abstract_domain import Domain, Lattice
from signai.abstractions.sign_abstraction import (
    BOTTOM,
    NEGATIVE,
    POSITIVE,
    TOP,
    ZERO,
    Sign,
)
