"""
This module provides the :class:`UserOptionConfigured` mixin, which copies the fields of a :class:`.UserOptions`
dataclass onto an instance and remembers them so the instance can later be put back the way it was built.

Example::

    >>> from rotconv.equivalents import EquivalentsSolver, EquivalentsOptions
    >>> solver = EquivalentsSolver(EquivalentsOptions(euler_unit='rad'))
    >>> solver.euler_unit = 'deg'
    >>> solver.reset_settings()
    >>> solver.euler_unit
    'rad'

.. Note::
    :class:`UserOptionConfigured` has to be listed before the options class in the bases so that its ``__init__`` runs
    first.
"""

import copy

from typing import Generic, TypeVar

from rotconv.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
The options dataclass a configured class is built from
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin that applies a :class:`.UserOptions` instance to ``self`` and keeps a private copy of it.

    Subclasses pass their options type and the (possibly ``None``) options instance up the chain::

        class EquivalentsSolver(UserOptionConfigured[EquivalentsOptions], EquivalentsOptions):
            def __init__(self, options=None):
                super().__init__(EquivalentsOptions, options=options)

    The options are checked (through :meth:`.UserOptions.override_options`) when they are applied, so a bad option
    fails at construction instead of on first use.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The :class:`.UserOptions` subclass used when `options` is ``None``
        :param options: The options to apply
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        # later changes to the caller's instance must not leak into a reset
        self._original_options: OptionsT = copy.deepcopy(options)

    def reset_settings(self) -> None:
        """
        Puts every option attribute back to the value it had when the instance was created.
        """

        copy.deepcopy(self._original_options).apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The options the instance was created with (read only).
        """

        return self._original_options
