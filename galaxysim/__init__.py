"""Particle, spawning, SPH material and kernel, selection and wall/BVH building blocks for 2D simulations."""

__version__ = "0.1.0"