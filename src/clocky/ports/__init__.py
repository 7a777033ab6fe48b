from .clock import Clock, InstantSource, local_now

__all__ = [
    "Clock",
    "InstantSource",
    "local_now",
]
