from cssbuild.shapes.model import Circle, Rectangle, Shape, make_rectangle

__all__ = ["Circle", "Rectangle", "Shape", "make_rectangle"]
