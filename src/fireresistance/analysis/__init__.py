"""
Calculation Engine
==================
Interpolation over the digitized ACI 216.1M-14 figures.

Why is this file needed?
------------------------
1. Temperature: two-stage interpolation over the slab depth/time curves.
2. Strength: retained fractions and their inverse (critical temperatures).
3. Composition: the rebar query and the library object that ties them together.

Note: This package should be pure Python/NumPy; matplotlib is only touched by
the optional ``plot`` previews.
"""
