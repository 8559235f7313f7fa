"""Quaternions for 3D rotation and degree/radian conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vectors import Vector, Vector3d


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion with vector part (x, y, z) and scalar part w."""

    x: float
    y: float
    z: float
    w: float = 0.0

    @staticmethod
    def from_euler(euler: Vector) -> Quaternion:
        """Build a quaternion from Euler angles given in degrees."""
        rx, ry, rz = (degrees_to_radians(euler.get(i)) for i in range(3))
        cosz, sinz = math.cos(rz * 0.5), math.sin(rz * 0.5)
        cosy, siny = math.cos(ry * 0.5), math.sin(ry * 0.5)
        cosx, sinx = math.cos(rx * 0.5), math.sin(rx * 0.5)
        return Quaternion(
            sinx * cosy * cosz - cosx * siny * sinz,
            cosx * siny * cosz + sinx * cosy * sinz,
            cosx * cosy * sinz - sinx * siny * cosz,
            cosx * cosy * cosz + sinx * siny * sinz,
        )

    def norm(self) -> float:
        """Length of the quaternion; 1 for a valid rotation."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    def conjugate(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def rotate(self, vector: Vector) -> Vector3d:
        """Rotate a 3D vector by this quaternion."""
        point = Quaternion(float(vector.get(0)), float(vector.get(1)), float(vector.get(2)), 0.0)
        return (self * point * self.conjugate()).vector3d()

    def vector3d(self) -> Vector3d:
        """The vector part as a Vector3d."""
        return Vector3d(self.x, self.y, self.z)

    def to_string(self) -> str:
        return f"Quaternion({self.x:f}; {self.y:f}; {self.z:f}; {self.w:f})"

    def __str__(self) -> str:
        return self.to_string()