"""
Pricing types — image references.

Variant images and product covers live in different namespaces; a variant
image id is never a valid cover id and vice versa, so each gets its own type.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VariantImage:
    image_id: str


@dataclass(frozen=True, slots=True)
class ProductCover:
    image_id: str


@dataclass(frozen=True, slots=True)
class Placeholder:
    pass


type ImageRef = VariantImage | ProductCover | Placeholder

PLACEHOLDER = Placeholder()


__all__ = (
    "VariantImage",
    "ProductCover",
    "Placeholder",
    "ImageRef",
    "PLACEHOLDER",
)
