from .brightness import analyze_image_brightness, is_image_light

__all__ = ["analyze_image_brightness", "is_image_light"]
