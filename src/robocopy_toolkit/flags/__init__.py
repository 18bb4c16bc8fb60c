from .attributes import AttributeFlags
from .bits import clear_flag, has, set_flag, toggle_flag
from .content import CopyFlags, DirCopyFlags
from .units import SizedQuantity, SizeUnit

__all__ = [
    'AttributeFlags',
    'CopyFlags',
    'DirCopyFlags',
    'SizeUnit',
    'SizedQuantity',
    'clear_flag',
    'has',
    'set_flag',
    'toggle_flag',
]
