"""Rendering subpackage.

Turns a stack of map layer images into a single canvas and draws hex
markers on top of it:

* :mod:`hades_map.renderer.base_map` composites the layers, normalising
  every layer to the size of the first one.
* :mod:`hades_map.renderer.marker` loads and sizes a marker asset and works
  out where on the canvas it goes.
* :mod:`hades_map.renderer.highlight` draws a resolved marker.
* :mod:`hades_map.renderer.map` ties the steps together behind
  ``HexMapRenderer`` with a per-renderer marker cache.
"""
