"""
Configuration of the curve rendering: default precision, display toggles and styles.

The configuration is a YAML file, loaded into nested `dotdict` objects and merged
over the defaults, e.g.:

    precision: 0.005
    styles:
        curve: {color: '#008000', line_width: 4}
"""
from typing import *

import copy
import logging
import yaml

from .exceptions import ConfigError
from .render_plan import Style


class dotdict(dict):
    """
    dot.notation access to dictionary attributes
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            return self.__getattribute__(item)

    @classmethod
    def create(cls, cfg: Any):
        """
        - recursively replace all dicts by the dotdict.
        """
        if isinstance(cfg, dict):
            items = ((k, cls.create(v)) for k, v in cfg.items())
            return dotdict(items)
        elif isinstance(cfg, list):
            return [cls.create(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return tuple([cls.create(i) for i in cfg])
        else:
            return cfg

    @staticmethod
    def serialize(cfg):
        if isinstance(cfg, (dict, dotdict)):
            return {k: dotdict.serialize(v) for k, v in cfg.items()}
        elif isinstance(cfg, list):
            return [dotdict.serialize(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return tuple([dotdict.serialize(i) for i in cfg])
        else:
            return cfg


_defaults = {
    'precision': 0.01,
    'scaffold_t': 0.5,
    'render_control': True,
    'render_tangent': True,
    'control_point_radius': 8.0,
    'styles': {
        'control_polygon': {'color': '#ff0000', 'line_width': 1},
        'scaffold': {'color': '#ffff00', 'line_width': 2},
        'curve': {'color': '#00ff00', 'line_width': 3},
        'control_point': {'color': '#0000ff', 'line_width': 0},
    }
}


def default_config() -> dotdict:
    return dotdict.create(copy.deepcopy(_defaults))


def deep_merge(base: dotdict, patch: Dict[str, Any]) -> dotdict:
    """
    Return copy of `base` with items of `patch` substituted, dicts are merged recursively.
    """
    new_cfg = dotdict(base)
    for key, val in patch.items():
        if isinstance(val, dict) and isinstance(base.get(key, None), dict):
            new_cfg[key] = deep_merge(base[key], val)
        else:
            new_cfg[key] = dotdict.create(val)
    return new_cfg


def _check_styles(cfg: dotdict):
    if not isinstance(cfg.styles, dict):
        raise ConfigError(f"Key 'styles' must be a mapping of style names, got {type(cfg.styles).__name__}.")
    known = _defaults['styles'].keys()
    for name, item in cfg.styles.items():
        if name not in known:
            raise ConfigError(f"Unknown style '{name}', expected one of: {list(known)}.")
        if not isinstance(item, dict) or 'color' not in item:
            raise ConfigError(f"Style '{name}' must be a mapping with the 'color' key.")


def load_config(path) -> dotdict:
    """
    Load configuration from given YAML file and merge it over the defaults.
    """
    with open(path) as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping, got {type(cfg).__name__}.")
    dd = deep_merge(default_config(), cfg)
    _check_styles(dd)
    logging.info(f"Loaded configuration: {path}")
    return dd


def dump_config(config, path):
    with open(path, "w") as f:
        yaml.safe_dump(dotdict.serialize(config), f)


def style(cfg: dotdict, name: str) -> Style:
    try:
        item = cfg.styles[name]
    except KeyError:
        raise ConfigError(f"Missing style '{name}' in the configuration.")
    return Style(color=item['color'], line_width=float(item.get('line_width', 1)))
