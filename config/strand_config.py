"""
Configuration for the strand growth generator.

Option names follow the host-facing camelCase keys (``lossQuantity``,
``exceptionProb``, ...); the dataclass stores them as snake_case fields.
"""

from dataclasses import dataclass, fields, replace, asdict
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from pathlib import Path
import json

import structlog

logger = structlog.get_logger()

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class StrandConfig:
    loss_quantity: float = 0.03       # Width lost per step
    min_sleep: float = 10             # Floor added to every spawn delay (ms)
    loop_loss: float = 1.0            # Width kept by a spawned child
    main_loss: float = 1.0            # Width kept by the parent after spawning
    time: float = 0.3                 # Direction jitter per step
    exception_prob: float = 0.4       # Chance a spawn is suppressed
    colorful: bool = False            # Random color per spawned strand
    fast_mode: bool = True            # Halves the spawn timing contribution
    fade_out: bool = False            # Periodic translucent overlay
    fade_amount: float = 0.05         # Overlay alpha per tick
    run_spawn: bool = True            # Seed an initial strand on start
    fade_interval: float = 250        # ms between fade ticks
    initial_mass: float = 1.0         # Seed width = initial_mass * 10
    indicate_new_loop: bool = True    # Marker circle where strands are born
    fit_screen: bool = True           # Resize surface to the viewport on start
    infinite: bool = False            # No width-based termination
    string_color: str = '#ffffff'
    bg_color: RGB = (0, 0, 0)

    @classmethod
    def from_options(cls, options: Optional[Union[Mapping[str, Any], 'StrandConfig']] = None) -> 'StrandConfig':
        """
        Merge a flat option mapping over the defaults.

        Keys may be camelCase host names or snake_case field names.
        Unknown keys are ignored; values are coerced to the field type.
        """
        if options is None:
            return cls()
        if isinstance(options, StrandConfig):
            return options
        if not isinstance(options, Mapping):
            raise TypeError(f"options must be a mapping, got {type(options).__name__}")

        overrides: Dict[str, Any] = {}
        for key, value in options.items():
            name = OPTION_NAMES.get(key, key)
            if name not in _FIELD_TYPES:
                logger.warning("Ignoring unknown option", option=key)
                continue
            overrides[name] = _coerce(key, _FIELD_TYPES[name], value)

        return replace(cls(), **overrides)

    def to_options(self) -> Dict[str, Any]:
        """Return the config as a camelCase option mapping."""
        data = asdict(self)
        data['bg_color'] = list(self.bg_color)
        return {_CAMEL_NAMES[name]: value for name, value in data.items()}


OPTION_NAMES = {
    'lossQuantity': 'loss_quantity',
    'minSleep': 'min_sleep',
    'loopLoss': 'loop_loss',
    'mainLoss': 'main_loss',
    'time': 'time',
    'exceptionProb': 'exception_prob',
    'colorful': 'colorful',
    'fastMode': 'fast_mode',
    'fadeOut': 'fade_out',
    'fadeAmount': 'fade_amount',
    'runSpawn': 'run_spawn',
    'fadeInterval': 'fade_interval',
    'initialMass': 'initial_mass',
    'indicateNewLoop': 'indicate_new_loop',
    'fitScreen': 'fit_screen',
    'infinite': 'infinite',
    'stringColor': 'string_color',
    'bgColor': 'bg_color',
}

_CAMEL_NAMES = {snake: camel for camel, snake in OPTION_NAMES.items()}

_FIELD_TYPES = {
    f.name: type(f.default) for f in fields(StrandConfig)
}

_BOOL_STRINGS = {'true': True, 'false': False, '1': True, '0': False}


def _coerce(key: str, field_type: type, value: Any) -> Any:
    try:
        if field_type is bool:
            if isinstance(value, str):
                text = value.strip().lower()
                if text not in _BOOL_STRINGS:
                    raise ValueError("expected true or false")
                return _BOOL_STRINGS[text]
            return bool(value)
        if field_type is tuple:
            rgb = tuple(int(c) for c in value)
            if len(rgb) != 3:
                raise ValueError("expected 3 channels")
            return rgb
        if field_type is str:
            return str(value)
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value for option '{key}': {value!r} ({e})") from e


def load_config(path: str = 'config/strands.json') -> StrandConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return StrandConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    return StrandConfig.from_options(data)


def save_config(config: StrandConfig, path: str = 'config/strands.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(config.to_options(), f, indent=2)

    print(f"Saved config to {config_path}")
