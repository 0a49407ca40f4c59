# -*- coding: utf-8 -*-
"""The numeric package is a toolbox of stateless functions on real numbers and real functions.

It covers modular arithmetic and angles, linear and bilinear interpolation, and bracketing and bisection of roots.
"""
