from stylegraph.config import UpgradeConfig
from stylegraph.transforms.base import Transform
from stylegraph.transforms.layer_utilities import LayerUtilitiesTransform


def builtin_transforms(config=None):
    """The built-in transforms, set up for *config*'s layers and at-rule name."""
    config = config or UpgradeConfig()
    return [
        LayerUtilitiesTransform(layers=config.split_layers, at_rule=config.utility_at_rule),
    ]


BUILTIN_TRANSFORMS = builtin_transforms()


def apply_transforms(stylesheet, custom_transforms=None, config=None):
    """Apply all built-in transforms (and any custom ones) to *stylesheet*'s tree."""
    transforms = builtin_transforms(config) if config is not None else list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    if stylesheet.root is None:
        return stylesheet
    for t in transforms:
        t.apply(stylesheet.root, stylesheet)
    return stylesheet


__all__ = [
    "Transform",
    "LayerUtilitiesTransform",
    "BUILTIN_TRANSFORMS",
    "builtin_transforms",
    "apply_transforms",
]
