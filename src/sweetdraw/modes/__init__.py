from sweetdraw.modes.base import BaseMode, register_mode, get_mode, list_modes  # noqa: F401

# Import built-in modes to trigger registration
import sweetdraw.modes.single  # noqa: F401
import sweetdraw.modes.multiple  # noqa: F401
import sweetdraw.modes.distinct  # noqa: F401
