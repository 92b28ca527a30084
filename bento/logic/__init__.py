"""Core business logic layer.

Subpackages:
- scaling: pan area/volume and yield scaling
- imports: recipe/receipt import normalization and text segmentation
"""
__all__ = ["scaling", "imports"]
