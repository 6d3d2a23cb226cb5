# -*- coding: utf-8 -*-
"""
Configuration Records Module

Immutable option records for encoding and rendering. Every record is
validated when it is constructed, so an invalid configuration is rejected
before any encoding work starts.

Classes:
    EncodeOptions: Error correction level, mask pattern, charset, mode override
    RenderStyle: Module size, colours, corner radius, quiet zone, logo
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

from PIL import Image, ImageColor

from .constants import ECLevel, Mode
from .exceptions import InvalidConfiguration

Color = Union[str, Tuple[int, int, int]]


def _parse_color(value: Color, name: str) -> Tuple[int, int, int]:
    if isinstance(value, str):
        try:
            return ImageColor.getrgb(value)[:3]
        except ValueError:
            raise InvalidConfiguration(f'Invalid {name}: {value!r}') from None
    rgb = tuple(value)
    if len(rgb) != 3 or not all(isinstance(v, int) and 0 <= v <= 255 for v in rgb):
        raise InvalidConfiguration(f'Invalid {name}: {value!r}')
    return rgb


@dataclass(frozen=True)
class EncodeOptions:
    """
    Parameters of one encode call.

    Args:
        ec_level (Union[ECLevel, str]): Error correction level ('L', 'M', 'Q', 'H')
            - L: ~7% recovery capability
            - M: ~15% recovery capability
            - Q: ~25% recovery capability
            - H: ~30% recovery capability
        mask_pattern (int): Mask pattern 0-7, always caller-selected
        charset (str): Codec for byte mode (e.g., 'utf-8', 'iso-8859-1')
        mode (Optional[Union[Mode, str]]): Requested mode; None to auto-detect

    Raises:
        InvalidConfiguration: If a value is out of range or unknown

    Example:
        >>> EncodeOptions(ec_level='q', mask_pattern=3).ec_level
        <ECLevel.QUARTILE: (3, 'Q', 2)>
    """

    ec_level: Union[ECLevel, str] = ECLevel.LOW
    mask_pattern: int = 0
    charset: str = 'utf-8'
    mode: Optional[Union[Mode, str]] = None

    def __post_init__(self):
        object.__setattr__(self, 'ec_level', ECLevel.parse(self.ec_level))
        if self.mode is not None:
            object.__setattr__(self, 'mode', Mode.parse(self.mode))
        if isinstance(self.mask_pattern, bool) or not isinstance(self.mask_pattern, int) \
                or not 0 <= self.mask_pattern <= 7:
            raise InvalidConfiguration(f'Mask pattern must be between 0 and 7, got {self.mask_pattern!r}')
        if not isinstance(self.charset, str) or not self.charset.strip():
            raise InvalidConfiguration(f'Charset must be a codec name, got {self.charset!r}')


@dataclass(frozen=True)
class RenderStyle:
    """
    Visual parameters of a rendered symbol.

    Args:
        module_size (int): Pixel size per module, at least 1
        border (int): Quiet zone size in modules (recommended: 4+)
        active_color (Color): Fill of dark modules
        inactive_color (Color): Fill of light modules inside the symbol
        background_color (Color): Fill of the quiet zone
        corner_radius (int): Rounded corner radius of active modules in pixels,
            at most half the module size
        logo (Optional[Image.Image]): Image pasted over the centre of the symbol
        logo_ratio (float): Logo width relative to the symbol width (0 < ratio <= 0.3)
    """

    module_size: int = 10
    border: int = 4
    active_color: Color = (0, 0, 0)
    inactive_color: Color = (255, 255, 255)
    background_color: Color = (255, 255, 255)
    corner_radius: int = 0
    logo: Optional[Any] = field(default=None, compare=False)
    logo_ratio: float = 0.2

    def __post_init__(self):
        if not isinstance(self.module_size, int) or self.module_size < 1:
            raise InvalidConfiguration(f'Module size must be at least 1, got {self.module_size!r}')
        if not isinstance(self.border, int) or self.border < 0:
            raise InvalidConfiguration(f'Border must be a non-negative integer, got {self.border!r}')
        if not isinstance(self.corner_radius, int) or not 0 <= self.corner_radius <= self.module_size // 2:
            raise InvalidConfiguration(
                f'Corner radius must be between 0 and {self.module_size // 2}, got {self.corner_radius!r}'
            )
        if self.logo is not None and not isinstance(self.logo, Image.Image):
            raise InvalidConfiguration('Logo must be a PIL image')
        if not 0 < self.logo_ratio <= 0.3:
            raise InvalidConfiguration(f'Logo ratio must be in (0, 0.3], got {self.logo_ratio!r}')
        for name in ('active_color', 'inactive_color', 'background_color'):
            object.__setattr__(self, name, _parse_color(getattr(self, name), name))

