from .blink_controller import BlinkController

__all__ = ["BlinkController"]
