from funicular.stylesheet.model import ClassToken, StyleRule, Stylesheet, Variant
from funicular.stylesheet.parser import parse_token
from funicular.stylesheet.resolver import Resolver, resolve
from funicular.stylesheet.serializer import serialize_stylesheet
from funicular.stylesheet.synthesizer import merge_stylesheets, synthesize

__all__ = [
    "ClassToken",
    "StyleRule",
    "Stylesheet",
    "Variant",
    "parse_token",
    "Resolver",
    "resolve",
    "serialize_stylesheet",
    "merge_stylesheets",
    "synthesize",
]
