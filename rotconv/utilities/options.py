from dataclasses import dataclass, fields

from typing import Any, Dict

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    Base dataclass for the user configurable settings of a class.

    A class ``Thing`` that can be configured gets a companion ``ThingOptions`` dataclass deriving from this one, whose
    fields are the settings and their defaults.  ``Thing.__init__`` accepts an ``options`` keyword argument and copies
    the fields onto the instance with :meth:`apply_options` (or inherits :class:`.UserOptionConfigured` which does it
    for you).  :class:`.EquivalentsOptions` and :class:`.EquivalentsSolver` are such a pair.

    For example:
        >>> @dataclass
        >>> class DisplayOptions(UserOptions):
        >>>     digits: int = 4

        >>> class Display:
        >>>     def __init__(self, options=None):
        >>>         if options is None:
        >>>             options = DisplayOptions()
        >>>         options.apply_options(self)
        >>> Display().digits
        ...     4
    """

    def override_options(self):
        '''
        Hook to check or adjust the fields before they are applied.  Raise an exception for bad settings.
        '''
        pass

    def apply_options(self, target: object) -> None:
        """
        Set each field as an attribute of `target`

        :param target: the instance to configure
        """
        target.__dict__.update(self.options_dict)

    @property
    def options_dict(self) -> Dict[str, Any]:
        """
        The dataclass fields and their current values, after :meth:`override_options` has run.
        """

        self.override_options()
        return {field.name: getattr(self, field.name) for field in fields(self)}
