"""Image-to-text rendering: scale calculation, sampling and frame assembly."""

from giv.render.frame import render_frame
from giv.render.sampler import sample
from giv.render.scale import Scale, calculate_scale

__all__ = ["Scale", "calculate_scale", "render_frame", "sample"]
