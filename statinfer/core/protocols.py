"""
Core protocols for statinfer.

Backends are matched structurally (Protocol) rather than nominally (ABC),
so a domain can add a backend without inheriting from anything here.
"""

from typing import Protocol, TypeVar, runtime_checkable

from statinfer.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a domain-specific design and produces a
    domain-specific parameter payload wrapped in a Result.

    Backends are stateless: all configuration is carried by the design
    (replicate count, seed, alternative, ...). This makes them easy to
    test and swap.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_qr', 'cpu_bootstrap', 'cpu_permutation'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the statistical computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If the design is invalid for this backend
        """
        ...
