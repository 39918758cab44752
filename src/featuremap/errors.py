"""Exceptions raised while building or drawing a feature map"""


class FeatureMapError(Exception):
    pass


class ConfigurationError(FeatureMapError):
    """Invalid panel geometry, track options or feature coordinates"""


class ShapePreconditionError(FeatureMapError):
    """A glyph was asked to draw a feature its shape cannot represent"""


class ResourceError(FeatureMapError):
    """Surface allocation or image encoding failed"""
