"""
lumen: an offline Monte Carlo path tracer.

Subpackages:
    core: vectors, rays, bounding boxes, sampling helpers and noise
    geometry: intersectable objects and the BVH
    materials: materials and textures
    camera: thin-lens camera
    renderer: radiance estimator, sampling loop, tone mapping and output
"""

__version__ = "0.1.0"
