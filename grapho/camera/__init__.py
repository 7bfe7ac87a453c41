"""Viewport, ray, quaternion and matrix helpers, and a turntable camera."""