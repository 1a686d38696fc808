"""
The MODEL layer contains pure data structures and table lookups.
It has NO knowledge of plotting backends or interpolation strategy.
It deals with Curves, Material categories, Rating tables and I/O.
"""
