# -*- coding: utf-8 -*-
"""The core package holds the integer interval types used to describe grid regions.

It also defines the exceptions raised across panokit, so callers can catch them without reaching into submodules.
"""
