"""
Small supporting utilities: the dataclass based user options and the mixin that applies them.
"""
