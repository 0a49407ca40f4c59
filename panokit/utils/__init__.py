# -*- coding: utf-8 -*-
"""Conversions between panokit intervals and the geometry and raster objects of the wider geospatial stack."""
