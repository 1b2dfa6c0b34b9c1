"""
Resolve "package.module:attribute" targets to Slice bundles.
"""

import importlib

from slicekit.core import Slice, SliceConfig


def load_slice(target: str) -> Slice:
    """
    Import a Slice (or SliceConfig, built on the spot) by dotted path.

    Args:
        target: "package.module:attribute"

    Raises:
        ValueError: If the target is malformed or names something else
        ImportError: If the module cannot be imported
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"target must look like 'package.module:attribute', got {target!r}")

    module = importlib.import_module(module_name)
    obj = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ValueError(f"{module_name} has no attribute {attr!r}") from None

    if isinstance(obj, SliceConfig):
        obj = obj.build()
    if not isinstance(obj, Slice):
        raise ValueError(f"{target} is a {type(obj).__name__}, not a Slice")
    return obj
