import math
import numpy as np
from transform import lookAt

class OrbitCamera:
    """Camara que orbita `center` no plano XZ, a um dado raio e altura."""

    def __init__(self, radius=200.0, height=80.0, min_radius=20.0, max_radius=600.0):
        self.radius = radius
        self.height = height
        self.min_radius = min_radius
        self.max_radius = max_radius
        self.angle = 0.0
        self.center = np.array([0.0, 0.0, 0.0], dtype=np.float32)
        self.up = np.array([0.0, 1.0, 0.0], dtype=np.float32)

    def rotate(self, delta_deg):
        self.angle = (self.angle + delta_deg) % 360.0

    def tilt(self, delta):
        # limitar a altura em funcao do raio
        limit = self.radius * 4.0
        self.height = max(-limit, min(self.height + delta, limit))

    def zoom(self, factor):
        # escalar raio e altura pra manter o angulo
        new_radius = self.radius * factor
        ratio = self.height / self.radius

        if new_radius < self.min_radius: new_radius = self.min_radius
        if new_radius > self.max_radius: new_radius = self.max_radius

        self.radius = new_radius
        self.height = new_radius * ratio

    def eye(self):
        rad = math.radians(self.angle)
        return np.array([
            self.center[0] + self.radius * math.sin(rad),
            self.center[1] + self.height,
            self.center[2] + self.radius * math.cos(rad),
        ], dtype=np.float32)

    def get_view_matrix(self):
        eye = self.eye()
        return lookAt(eye, self.center, self.up), eye
